"""Users router: read and replace a user's profile."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from hexuser.presentation.api.dependencies import RepoFactory, UserUseCaseDep
from hexuser.presentation.api.schemas import UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bound of the BIGINT primary key
MAX_USER_ID = 2**63 - 1

UserId = Annotated[int, Path(gt=0, le=MAX_USER_ID, description="User ID")]


@router.get(
    "/{user_id}",
    summary="Get user by ID",
    response_model=UserResponse,
    responses={
        200: {"description": "The user"},
        404: {"description": "No user with this ID (empty body)"},
    },
)
async def get_user(
    user_id: UserId,
    use_case: UserUseCaseDep,
) -> UserResponse | Response:
    """Get a single user by ID."""
    user = await use_case.get_user_by_id(user_id)

    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return UserResponse.from_domain(user)


@router.put(
    "/{user_id}",
    summary="Update user",
    response_model=UserResponse,
    responses={
        200: {"description": "The updated user"},
        404: {"description": "No user with this ID (empty body, nothing written)"},
    },
)
async def update_user(
    user_id: UserId,
    request: UserUpdateRequest,
    use_case: UserUseCaseDep,
    factory: RepoFactory,
) -> UserResponse | Response:
    """
    Replace the first name, last name and email of an existing user.

    All three fields are overwritten; the ID in the path is kept.
    A missing user is never created.
    """
    try:
        user = await use_case.update_user(user_id, request.to_domain())
        if user is not None:
            await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler answer storage failures
        raise

    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    logger.info("User %s updated", user_id)
    return UserResponse.from_domain(user)
