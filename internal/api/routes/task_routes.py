"""
Task API Routes.
GET lists every task, POST adds one and redirects back to the list.
"""

import time
from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse, RedirectResponse

from core.errors import RepositoryError, ValidationError
from core.logger import logger
from internal.api.dependencies import get_task_service
from internal.api.schemas import FieldErrorsResponse, MessageResponse, TaskListResponse
from services.interfaces import ITaskService

LOAD_FAILED_MESSAGE = "Failed to load tasks."
ADD_FAILED_MESSAGE = "Failed to add task. Please try again."

router = APIRouter(tags=["Tasks"])


@router.get(
    "/",
    response_model=TaskListResponse,
    summary="List Tasks",
    description="Get every task, newest first",
    responses={
        500: {"model": MessageResponse, "description": "Tasks could not be loaded"},
    },
)
async def list_tasks(task_service: ITaskService = Depends(get_task_service)):
    """
    List all tasks.

    **Returns:**
    - tasks: every task ordered by creation time, newest first
    """
    start_time = time.time()

    try:
        result = await task_service.load_tasks()

    except RepositoryError as e:
        elapsed_time = time.time() - start_time
        logger.error(f"❌ API: Failed to load tasks after {elapsed_time:.2f}s: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": LOAD_FAILED_MESSAGE},
        )

    elapsed_time = time.time() - start_time
    logger.info(
        f"API: Listed {len(result['tasks'])} tasks, time={elapsed_time:.2f}s"
    )
    return result


@router.post(
    "/",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Add Task",
    description="Create a task from form fields and redirect to the list",
    responses={
        303: {"description": "Task created, redirect to the list"},
        400: {"model": FieldErrorsResponse, "description": "Invalid input"},
        500: {"model": MessageResponse, "description": "Task could not be stored"},
    },
)
async def add_task(
    title: Optional[str] = Form(default=None, description="Task title"),
    description: Optional[str] = Form(default=None, description="Optional description"),
    task_service: ITaskService = Depends(get_task_service),
):
    """
    Add a new task.

    **Parameters:**
    - **title**: required, must not be blank
    - **description**: optional

    **Returns:**
    A redirect to `/` on success.
    """
    try:
        await task_service.add_task(title, description)

    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": e.to_dict()},
        )

    except RepositoryError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": ADD_FAILED_MESSAGE},
        )

    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
