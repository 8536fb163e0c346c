import threading
from typing import Any


def send_concurrent_posts(client, url: str, n: int = 4) -> list[Any]:
    """
    Send n concurrent HTTP POST requests using threads.

    Returns:
        List of response objects (or raised exceptions), one per thread.
    """
    results: list[Any] = [None] * n

    def worker(index: int) -> None:
        try:
            results[index] = client.post(url)
        except Exception as exc:  # noqa: BLE001
            results[index] = exc

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    return results
