from typing import List, Sequence, Union

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shared.logging import get_logger

from .errors import MalformedInput, SerializationFailure
from .schemas import Cart, CartCreate
from .store import CartStore

logger = get_logger(__name__)

router = APIRouter(prefix="/carts", tags=["carts"])


def get_store(request: Request) -> CartStore:
    return request.app.state.store


def render(content: Union[Cart, Sequence[Cart]], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    # PydanticSerializationError is a ValueError
    try:
        if isinstance(content, Cart):
            payload = content.model_dump(mode="json", by_alias=True)
        else:
            payload = [c.model_dump(mode="json", by_alias=True) for c in content]
        return JSONResponse(status_code=status_code, content=payload)
    except (TypeError, ValueError) as e:
        logger.error("Failed to encode response: %r", e)
        raise SerializationFailure("Failed to encode response") from e


@router.get("", response_model=List[Cart])
async def list_carts(store: CartStore = Depends(get_store)):
    return render(store.list())


@router.post("", response_model=Cart, status_code=status.HTTP_201_CREATED)
async def create_cart(request: Request, store: CartStore = Depends(get_store)):
    # Parse the raw body ourselves so a bad payload is a 400, not FastAPI's 422
    body = await request.body()
    try:
        payload = CartCreate.model_validate_json(body)
    except ValidationError as e:
        raise MalformedInput("Request body is not a valid cart") from e

    cart = store.create(payload.customer_id, payload.product_ids)
    logger.info("Created cart %s for customer %s", cart.id, cart.customer_id)
    return render(cart, status.HTTP_201_CREATED)
