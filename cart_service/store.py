"""In-memory cart storage.

Lives as long as the process. One lock guards the read-counter / append
sequence so ids are never handed out twice and a list never sees a cart
whose id was taken but which has not been appended yet.
"""
import threading
from typing import Iterable, List

from .schemas import Cart


class CartStore:
    def __init__(self, start_id: int = 1):
        self._lock = threading.Lock()
        self._carts: List[Cart] = []
        self._next_id = start_id

    def list(self) -> List[Cart]:
        with self._lock:
            return [cart.model_copy(deep=True) for cart in self._carts]

    def create(self, customer_id: int, product_ids: Iterable[int]) -> Cart:
        product_ids = list(product_ids)
        with self._lock:
            cart = Cart(id=self._next_id, customer_id=customer_id, product_ids=product_ids)
            self._next_id += 1
            self._carts.append(cart)
        return cart.model_copy(deep=True)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)
