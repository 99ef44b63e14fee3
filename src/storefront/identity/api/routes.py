"""FastAPI endpoints for accounts, sessions and wishlists."""

from fastapi import APIRouter, Depends, Query, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import AuthenticationError, dispatch
from storefront.identity.api.schemas import (
    AddToWishlistRequest,
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    WishlistItemResponse,
)
from storefront.identity.security import current_user_id, hash_password, issue_token, verify_password
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User
from storefront.identity.wishlist.management import AddToWishlist, RemoveFromWishlist
from storefront.identity.wishlist.wishlist import WishlistItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["identity"])
wishlist_router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        external_id=body.external_id,
    )
    user = dispatch(command)
    return AuthResponse(user=UserResponse.from_aggregate(user), token=issue_token(user.id))


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    user = current_domain.repository_for(User).by_email(body.email)
    if user is None or not verify_password(body.password, user.password):
        logger.info("login_failed")
        raise AuthenticationError("Invalid credentials")
    return AuthResponse(user=UserResponse.from_aggregate(user), token=issue_token(user.id))


@router.get("/user", response_model=UserResponse)
async def get_current_user(user_id: str = Depends(current_user_id)) -> UserResponse:
    user = current_domain.repository_for(User).find(user_id)
    if user is None:
        raise ObjectNotFoundError("User not found")
    return UserResponse.from_aggregate(user)


# --- Wishlist ---


@wishlist_router.get("", response_model=list[WishlistItemResponse])
async def list_wishlist(user_id: str = Query(..., alias="userId")) -> list[WishlistItemResponse]:
    items = current_domain.repository_for(WishlistItem).for_user(user_id)
    return [WishlistItemResponse.from_aggregate(i) for i in items]


@wishlist_router.post("", status_code=201, response_model=WishlistItemResponse)
async def add_to_wishlist(body: AddToWishlistRequest) -> WishlistItemResponse:
    item = dispatch(AddToWishlist(user_id=body.user_id, product_id=body.product_id))
    return WishlistItemResponse.from_aggregate(item)


@wishlist_router.delete("", status_code=204)
async def remove_from_wishlist(
    user_id: str = Query(..., alias="userId"),
    product_id: str = Query(..., alias="productId"),
) -> Response:
    dispatch(RemoveFromWishlist(user_id=user_id, product_id=product_id))
    return Response(status_code=204)
