from typing import Dict, Optional

import httpx


def client(timeout_sec: float = 15, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout_sec, transport=transport)


def auth_headers(secret_key: str) -> Dict[str, str]:
    # Payriff ждёт ключ как есть, без "Bearer "
    return {"Authorization": secret_key, "Content-Type": "application/json"}
