"""
Post endpoints for API v1.

These routes expose a CRUD API for posts.  Request bodies are
validated by pydantic before reaching the service; the service's
records are serialized through ``PostRead``.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from posts_api.app.core.exceptions import PostNotFoundError
from posts_api.app.models.post import MAX_POST_ID
from posts_api.app.schemas.post import PostCreate, PostRead, PostUpdate
from posts_api.app.services.post_service import PostService

router = APIRouter()

# Ids outside this range cannot exist in the store; they are rejected with 422.
PostId = Annotated[int, Path(ge=1, le=MAX_POST_ID)]


def get_post_service(request: Request) -> PostService:
    """Return the service instance attached to the application by ``create_app``."""
    return request.app.state.post_service


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_in: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Create a new post."""
    post = await service.create(post_in.title, post_in.content)
    return PostRead.model_validate(post)


@router.get("/", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    """Return all posts in creation order."""
    posts = await service.list_all()
    return [PostRead.model_validate(post) for post in posts]


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: PostId, service: PostService = Depends(get_post_service)) -> PostRead:
    """Retrieve a single post by ID.

    Returns HTTP 404 if the post is not found.
    """
    post = await service.find_one(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return PostRead.model_validate(post)


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: PostId,
    post_in: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Replace the title and content of an existing post."""
    try:
        post = await service.update(post_id, post_in.title, post_in.content)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return PostRead.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: PostId, service: PostService = Depends(get_post_service)) -> None:
    """Delete a post.

    Always answers 204, whether or not the post existed.
    """
    await service.remove(post_id)
    return None
