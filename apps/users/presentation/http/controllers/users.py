"""Users Controller."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response, status

from apps.users.application.commands.create_user import CreateUserInteractor
from apps.users.application.commands.rename_user import RenameUserInteractor
from apps.users.application.common.dto.user import CreateUserRequest, UpdateNicknameRequest
from apps.users.application.queries.get_user import GetUserInteractor
from apps.users.presentation.http.dependencies import (
    get_create_user_interactor,
    get_get_user_interactor,
    get_rename_user_interactor,
)
from apps.users.presentation.http.schemas.common import ErrorResponse
from apps.users.presentation.http.schemas.user import CreateUserRequestBody, UserResponseBody
from apps.users.setup.constants import NICKNAME_COLUMN_LENGTH

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserResponseBody,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(
    payload: CreateUserRequestBody,
    request: Request,
    response: Response,
    interactor: CreateUserInteractor = Depends(get_create_user_interactor),
) -> UserResponseBody:
    created = await interactor.execute(
        CreateUserRequest(nickname=payload.nickname, avatar=payload.avatar)
    )
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.user_id))
    return UserResponseBody.from_dto(created)


@router.get(
    "/{user_id}",
    response_model=UserResponseBody,
    responses=_NOT_FOUND,
    summary="Get user",
)
async def get_user(
    user_id: str,
    interactor: GetUserInteractor = Depends(get_get_user_interactor),
) -> UserResponseBody:
    return UserResponseBody.from_dto(await interactor.execute(user_id))


@router.put(
    "/{user_id}/nickname",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Rename user",
)
async def update_nickname(
    user_id: str,
    new_nickname: str = Query(..., min_length=1, max_length=NICKNAME_COLUMN_LENGTH),
    interactor: RenameUserInteractor = Depends(get_rename_user_interactor),
) -> Response:
    await interactor.execute(UpdateNicknameRequest(user_id=user_id, nickname=new_nickname))
    return Response(status_code=status.HTTP_200_OK)
