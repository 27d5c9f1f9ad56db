"""Post REST API routes - V1."""

from fastapi import APIRouter, Depends

from ...db import UserRepository, CommentRepository
from ...models import (
    CreatePostRequest,
    CreateCommentRequest,
    PostEnvelope,
    PostListResponse,
    CommentEnvelope,
    CommentListResponse,
    BookmarkResponse,
    StatusResponse,
)
from ...services import PostService
from .deps import get_user_repo, get_comment_repo, get_post_service, get_current_user_id
from .presenters import Presenter

router = APIRouter(prefix="/api/v1/post", tags=["Posts"])


@router.post("/addpost", response_model=PostEnvelope, status_code=201)
async def add_post(
    request: CreatePostRequest,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    users: UserRepository = Depends(get_user_repo)
):
    """Create a post for already-hosted media."""
    post = service.create_post(
        user_id,
        media_url=request.media.url,
        media_type=request.media.type,
        caption=request.caption,
        media_public_id=request.media.public_id
    )
    return PostEnvelope(message="Post created successfully", post=Presenter(users).post(post))


@router.get("/all", response_model=PostListResponse)
async def list_posts(
    _: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    users: UserRepository = Depends(get_user_repo),
    comments: CommentRepository = Depends(get_comment_repo)
):
    """All posts, newest first, with comments."""
    presenter = Presenter(users, comments)
    return PostListResponse(posts=[presenter.post(p) for p in service.list_posts()])


@router.get("/userpost/all", response_model=PostListResponse)
async def list_my_posts(
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    users: UserRepository = Depends(get_user_repo),
    comments: CommentRepository = Depends(get_comment_repo)
):
    """The caller's posts, newest first."""
    presenter = Presenter(users, comments)
    return PostListResponse(posts=[presenter.post(p) for p in service.list_user_posts(user_id)])


@router.get("/{post_id}/like", response_model=StatusResponse)
async def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Like a post. The author is notified in realtime when online."""
    await service.like_post(user_id, post_id)
    return StatusResponse(message="Post liked")


@router.get("/{post_id}/dislike", response_model=StatusResponse)
async def dislike_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Remove a like. The author is notified in realtime when online."""
    await service.dislike_post(user_id, post_id)
    return StatusResponse(message="Post disliked")


@router.post("/{post_id}/comment", response_model=CommentEnvelope, status_code=201)
async def add_comment(
    post_id: str,
    request: CreateCommentRequest,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    users: UserRepository = Depends(get_user_repo)
):
    """Comment on a post."""
    comment = service.add_comment(user_id, post_id, request.text)
    return CommentEnvelope(message="Comment added", comment=Presenter(users).comment(comment))


@router.api_route("/{post_id}/comment/all", methods=["GET", "POST"], response_model=CommentListResponse)
async def list_comments(
    post_id: str,
    _: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service),
    users: UserRepository = Depends(get_user_repo)
):
    """Comments on a post, newest first."""
    presenter = Presenter(users)
    return CommentListResponse(comments=[presenter.comment(c) for c in service.list_comments(post_id)])


@router.delete("/delete/{post_id}", response_model=StatusResponse)
async def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Delete one of the caller's posts."""
    service.delete_post(user_id, post_id)
    return StatusResponse(message="Post deleted")


@router.get("/{post_id}/bookmark", response_model=BookmarkResponse)
async def bookmark_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Toggle a bookmark on a post."""
    bookmarked = service.toggle_bookmark(user_id, post_id)
    return BookmarkResponse(
        message="Post bookmarked" if bookmarked else "Post removed from bookmarks",
        is_bookmarked=bookmarked
    )
