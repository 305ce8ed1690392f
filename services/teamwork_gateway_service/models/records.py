"""Record models synthesized from Teamwork sample payloads.

Generated by ``teamwork-gateway-codegen generate``. Do not edit by hand.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from services.teamwork_gateway_service.models.base import OptionalString, UpstreamRecord

__all__ = [
    "BoardColumn",
    "Tag",
    "ParentTask",
    "Task",
    "TimeEntry",
    "Tagged",
    "TaskList",
]


class BoardColumn(UpstreamRecord):
    id: int | None = Field(default=None, validation_alias="id")
    name: OptionalString = Field(default=None, validation_alias="name")
    color: OptionalString = Field(default=None, validation_alias="color")


class Tag(UpstreamRecord):
    id: int | None = Field(default=None, validation_alias="id")
    name: OptionalString = Field(default=None, validation_alias="name")
    color: OptionalString = Field(default=None, validation_alias="color")
    project_id: int | None = Field(default=None, validation_alias="projectId")


class ParentTask(UpstreamRecord):
    content: OptionalString = Field(default=None, validation_alias="content")
    id: OptionalString = Field(default=None, validation_alias="id")


class Task(UpstreamRecord):
    id: int | None = Field(default=None, validation_alias="id")
    board_column: BoardColumn | None = Field(default=None, validation_alias="boardColumn")
    can_complete: bool | None = Field(default=None, validation_alias="canComplete")
    comments_count: int | None = Field(default=None, validation_alias="comments-count")
    description: OptionalString = Field(default=None, validation_alias="description")
    has_reminders: bool | None = Field(default=None, validation_alias="has-reminders")
    has_unread_comments: bool | None = Field(default=None, validation_alias="has-unread-comments")
    private: int | None = Field(default=None, validation_alias="private")
    content: OptionalString = Field(default=None, validation_alias="content")
    order: int | None = Field(default=None, validation_alias="order")
    project_id: int | None = Field(default=None, validation_alias="project-id")
    project_name: OptionalString = Field(default=None, validation_alias="project-name")
    todo_list_id: int | None = Field(default=None, validation_alias="todo-list-id")
    todo_list_name: OptionalString = Field(default=None, validation_alias="todo-list-name")
    tasklist_private: bool | None = Field(default=None, validation_alias="tasklist-private")
    tasklist_is_template: bool | None = Field(default=None, validation_alias="tasklist-isTemplate")
    status: OptionalString = Field(default=None, validation_alias="status")
    company_name: OptionalString = Field(default=None, validation_alias="company-name")
    company_id: int | None = Field(default=None, validation_alias="company-id")
    creator_id: int | None = Field(default=None, validation_alias="creator-id")
    creator_firstname: OptionalString = Field(default=None, validation_alias="creator-firstname")
    creator_lastname: OptionalString = Field(default=None, validation_alias="creator-lastname")
    updater_id: int | None = Field(default=None, validation_alias="updater-id")
    updater_firstname: OptionalString = Field(default=None, validation_alias="updater-firstname")
    updater_lastname: OptionalString = Field(default=None, validation_alias="updater-lastname")
    completed: bool | None = Field(default=None, validation_alias="completed")
    start_date: OptionalString = Field(default=None, validation_alias="start-date")
    due_date_base: OptionalString = Field(default=None, validation_alias="due-date-base")
    due_date: OptionalString = Field(default=None, validation_alias="due-date")
    created_at: OptionalString = Field(default=None, validation_alias="created-on")
    updated_at: OptionalString = Field(default=None, validation_alias="last-changed-on")
    position: int | None = Field(default=None, validation_alias="position")
    estimated_minutes: int | None = Field(default=None, validation_alias="estimated-minutes")
    priority: OptionalString = Field(default=None, validation_alias="priority")
    progress: int | None = Field(default=None, validation_alias="progress")
    harvest_enabled: bool | None = Field(default=None, validation_alias="harvest-enabled")
    parent_task_id: OptionalString = Field(default=None, validation_alias="parentTaskId")
    lockdown_id: OptionalString = Field(default=None, validation_alias="lockdownId")
    tasklist_lockdown_id: OptionalString = Field(default=None, validation_alias="tasklist-lockdownId")
    has_dependencies: int | None = Field(default=None, validation_alias="has-dependencies")
    has_predecessors: int | None = Field(default=None, validation_alias="has-predecessors")
    has_tickets: bool | None = Field(default=None, validation_alias="hasTickets")
    time_is_logged: OptionalString = Field(default=None, validation_alias="timeIsLogged")
    attachments_count: int | None = Field(default=None, validation_alias="attachments-count")
    predecessors: Any = Field(default=None, validation_alias="predecessors")
    can_edit: bool | None = Field(default=None, validation_alias="canEdit")
    view_estimated_time: bool | None = Field(default=None, validation_alias="viewEstimatedTime")
    creator_avatar_url: OptionalString = Field(default=None, validation_alias="creator-avatar-url")
    can_log_time: bool | None = Field(default=None, validation_alias="canLogTime")
    user_following_comments: bool | None = Field(default=None, validation_alias="userFollowingComments")
    user_following_changes: bool | None = Field(default=None, validation_alias="userFollowingChanges")
    dlm: int | None = Field(default=None, validation_alias="DLM")
    tags: list[Tag] | None = Field(default=None, validation_alias="tags")
    parent_task: ParentTask | None = Field(default=None, validation_alias="parent-task")


class TimeEntry(UpstreamRecord):
    project_id: OptionalString = Field(default=None, validation_alias="project-id")
    isbillable: OptionalString = Field(default=None, validation_alias="isbillable")
    tasklist_id: OptionalString = Field(default=None, validation_alias="tasklistId")
    todo_list_name: OptionalString = Field(default=None, validation_alias="todo-list-name")
    todo_item_name: OptionalString = Field(default=None, validation_alias="todo-item-name")
    isbilled: OptionalString = Field(default=None, validation_alias="isbilled")
    updated_date: OptionalString = Field(default=None, validation_alias="updated-date")
    todo_list_id: OptionalString = Field(default=None, validation_alias="todo-list-id")
    tags: Any = Field(default=None, validation_alias="tags")
    can_edit: bool | None = Field(default=None, validation_alias="canEdit")
    task_estimated_time: OptionalString = Field(default=None, validation_alias="taskEstimatedTime")
    company_name: OptionalString = Field(default=None, validation_alias="company-name")
    id: OptionalString = Field(default=None, validation_alias="id")
    invoice_no: OptionalString = Field(default=None, validation_alias="invoiceNo")
    person_last_name: OptionalString = Field(default=None, validation_alias="person-last-name")
    parent_task_name: OptionalString = Field(default=None, validation_alias="parentTaskName")
    date_user_perspective: OptionalString = Field(default=None, validation_alias="dateUserPerspective")
    minutes: OptionalString = Field(default=None, validation_alias="minutes")
    person_first_name: OptionalString = Field(default=None, validation_alias="person-first-name")
    description: OptionalString = Field(default=None, validation_alias="description")
    ticket_id: OptionalString = Field(default=None, validation_alias="ticket-id")
    created_at: OptionalString = Field(default=None, validation_alias="createdAt")
    task_is_private: OptionalString = Field(default=None, validation_alias="taskIsPrivate")
    parent_task_id: OptionalString = Field(default=None, validation_alias="parentTaskId")
    company_id: OptionalString = Field(default=None, validation_alias="company-id")
    project_status: OptionalString = Field(default=None, validation_alias="project-status")
    person_id: OptionalString = Field(default=None, validation_alias="person-id")
    project_name: OptionalString = Field(default=None, validation_alias="project-name")
    task_tags: Any = Field(default=None, validation_alias="task-tags")
    task_is_sub_task: OptionalString = Field(default=None, validation_alias="taskIsSubTask")
    todo_item_id: OptionalString = Field(default=None, validation_alias="todo-item-id")
    date: OptionalString = Field(default=None, validation_alias="date")
    has_start_time: OptionalString = Field(default=None, validation_alias="has-start-time")
    hours: OptionalString = Field(default=None, validation_alias="hours")


class Tagged(UpstreamRecord):
    id: int | None = Field(default=None, validation_alias="id")
    name: OptionalString = Field(default=None, validation_alias="name")
    color: OptionalString = Field(default=None, validation_alias="color")
    project_id: int | None = Field(default=None, validation_alias="projectId")


class TaskList(UpstreamRecord):
    id: OptionalString = Field(default=None, validation_alias="id")
    name: OptionalString = Field(default=None, validation_alias="name")
    description: OptionalString = Field(default=None, validation_alias="description")
    position: int | None = Field(default=None, validation_alias="position")
    project_id: OptionalString = Field(default=None, validation_alias="projectId")
    project_name: OptionalString = Field(default=None, validation_alias="projectName")
    updated_after: OptionalString = Field(default=None, validation_alias="updatedAfter")
    private: bool | None = Field(default=None, validation_alias="private")
    is_template: bool | None = Field(default=None, validation_alias="isTemplate")
    tagged: list[Tagged] | None = Field(default=None, validation_alias="tagged")
    milestone_id: OptionalString = Field(default=None, validation_alias="milestone-id")
    pinned: bool | None = Field(default=None, validation_alias="pinned")
    complete: bool | None = Field(default=None, validation_alias="complete")
    uncompleted_count: int | None = Field(default=None, validation_alias="uncompleted-count")
    status: OptionalString = Field(default=None, validation_alias="status")
