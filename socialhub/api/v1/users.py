"""User REST API routes - V1."""

from fastapi import APIRouter, Depends, Response

from ...db import UserRepository, PostRepository, CommentRepository
from ...models import (
    RegisterRequest,
    LoginRequest,
    EditProfileRequest,
    LoginResponse,
    ProfileEnvelope,
    UserListResponse,
    StatusResponse,
)
from ...services import UserService
from .deps import (
    get_settings,
    get_user_repo,
    get_post_repo,
    get_comment_repo,
    get_user_service,
    get_current_user_id,
)
from .presenters import Presenter

router = APIRouter(prefix="/api/v1/user", tags=["Users"])


@router.post("/register", response_model=StatusResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: UserService = Depends(get_user_service)
):
    """Create an account."""
    await service.register(request.username, request.email, request.password)
    return StatusResponse(message="Account successfully created")


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
    users: UserRepository = Depends(get_user_repo),
    posts: PostRepository = Depends(get_post_repo),
    comments: CommentRepository = Depends(get_comment_repo),
    settings=Depends(get_settings)
):
    """Log in; the access token is returned and also set as an HttpOnly cookie."""
    user, token = await service.login(request.email, request.password)

    response.set_cookie(
        settings.auth_cookie_name,
        token,
        httponly=True,
        samesite="strict",
        max_age=settings.jwt_expire_hours * 3600
    )
    return LoginResponse(
        message=f"Welcome Back, {user.username}",
        token=token,
        user=Presenter(users, comments).profile(user, posts)
    )


@router.get("/logout", response_model=StatusResponse)
async def logout(response: Response, settings=Depends(get_settings)):
    """Clear the auth cookie."""
    response.delete_cookie(settings.auth_cookie_name)
    return StatusResponse(message="Logged Out Successfully")


@router.get("/suggested", response_model=UserListResponse)
async def suggested_users(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
    users: UserRepository = Depends(get_user_repo)
):
    """Every other user, newest first."""
    presenter = Presenter(users)
    return UserListResponse(users=[presenter.user(u) for u in service.suggested_users(user_id)])


@router.get("/{profile_id}/profile", response_model=ProfileEnvelope)
async def get_profile(
    profile_id: str,
    _: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
    users: UserRepository = Depends(get_user_repo),
    posts: PostRepository = Depends(get_post_repo),
    comments: CommentRepository = Depends(get_comment_repo)
):
    """A user's profile with their posts and bookmarks."""
    user = service.get_profile(profile_id)
    return ProfileEnvelope(user=Presenter(users, comments).profile(user, posts))


@router.post("/edit-profile", response_model=ProfileEnvelope)
async def edit_profile(
    request: EditProfileRequest,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
    users: UserRepository = Depends(get_user_repo),
    posts: PostRepository = Depends(get_post_repo),
    comments: CommentRepository = Depends(get_comment_repo)
):
    """Edit the caller's bio, gender, or profile picture."""
    user = service.edit_profile(
        user_id,
        bio=request.bio,
        gender=request.gender,
        profile_picture=request.profile_picture
    )
    return ProfileEnvelope(
        message="Profile updated successfully",
        user=Presenter(users, comments).profile(user, posts)
    )


@router.post("/followUnfollow/{target_id}", response_model=StatusResponse)
async def follow_or_unfollow(
    target_id: str,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Toggle following ``target_id``."""
    following = service.follow_or_unfollow(user_id, target_id)
    return StatusResponse(message="Followed Successfully" if following else "Unfollowed Successfully")


@router.put("/disable-first-login", response_model=ProfileEnvelope)
async def disable_first_login(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
    users: UserRepository = Depends(get_user_repo),
    posts: PostRepository = Depends(get_post_repo),
    comments: CommentRepository = Depends(get_comment_repo)
):
    """Mark onboarding as done."""
    user = service.disable_first_login(user_id)
    return ProfileEnvelope(
        message="First login flag updated",
        user=Presenter(users, comments).profile(user, posts)
    )
