"""Task API router."""

from fastapi import APIRouter, Depends, Request, status

from ..models import DeleteResponse, TaskCreate, TaskResponse, TaskUpdate
from ..services import TaskService

router = APIRouter(prefix="/api/items", tags=["items"])


def get_task_service(request: Request) -> TaskService:
    """Service bound to the store opened in the application lifespan."""
    return request.app.state.task_service


# =============================================================================
# REST API Endpoints (JSON)
# =============================================================================


@router.get("", response_model=list[TaskResponse])
def list_items(service: TaskService = Depends(get_task_service)):
    """Get all tasks, newest first."""
    return [TaskResponse(**task) for task in service.list_tasks()]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    task_data: TaskCreate | None = None,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task."""
    fields = task_data.model_dump(exclude_unset=True) if task_data else {}
    return TaskResponse(**service.create_task(fields))


@router.put("/{item_id}", response_model=TaskResponse)
def update_item(
    item_id: str,
    task_data: TaskUpdate | None = None,
    service: TaskService = Depends(get_task_service),
):
    """Update only the supplied fields of a task."""
    fields = task_data.model_dump(exclude_unset=True) if task_data else {}
    return TaskResponse(**service.update_task(item_id, fields))


@router.delete("/{item_id}", response_model=DeleteResponse)
def delete_item(item_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a task."""
    return DeleteResponse(**service.delete_task(item_id))
