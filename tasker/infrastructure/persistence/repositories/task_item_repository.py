"""TaskItemRepository - SQLAlchemy implementation of the TaskItemRepository protocol."""

from uuid import UUID

from sqlalchemy import ColumnElement, case, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.entities.task_item import TaskItem
from tasker.domain.enums import Priority, TaskStatus
from tasker.domain.protocols.task_item_repository import TaskListCriteria, TaskSortKey
from tasker.infrastructure.persistence.models.task_item import (
    TaskItem as TaskItemModel,
)

# Enum order, not alphabetical order, decides how priority and status sort.
_PRIORITY_RANK = case(
    {priority.value: rank for rank, priority in enumerate(Priority)},
    value=TaskItemModel.priority,
)
_STATUS_RANK = case(
    {status.value: rank for rank, status in enumerate(TaskStatus)},
    value=TaskItemModel.status,
)

_ORDERINGS: dict[TaskSortKey, ColumnElement[object]] = {
    TaskSortKey.TITLE: TaskItemModel.title.asc(),
    TaskSortKey.TITLE_DESC: TaskItemModel.title.desc(),
    TaskSortKey.PRIORITY: _PRIORITY_RANK.asc(),
    TaskSortKey.PRIORITY_DESC: _PRIORITY_RANK.desc(),
    TaskSortKey.STATUS: _STATUS_RANK.asc(),
    TaskSortKey.STATUS_DESC: _STATUS_RANK.desc(),
    TaskSortKey.DUE_DATE: TaskItemModel.due_date.asc(),
    TaskSortKey.DUE_DATE_DESC: TaskItemModel.due_date.desc(),
    TaskSortKey.CREATED: TaskItemModel.created_at.asc(),
    TaskSortKey.CREATED_DESC: TaskItemModel.created_at.desc(),
}


class TaskItemRepository:
    """SQLAlchemy implementation for task persistence.

    Attributes:
        session: Unit-of-work session (commit is owned by the caller).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, task_id: UUID) -> TaskItem | None:
        model = await self.session.get(TaskItemModel, task_id)
        return self._to_domain(model) if model else None

    async def add(self, task: TaskItem) -> None:
        self.session.add(
            TaskItemModel(
                id=task.id,
                title=task.title,
                description=task.description,
                priority=task.priority.value,
                status=task.status.value,
                due_date=task.due_date,
                created_at=task.created_at,
                updated_at=task.updated_at,
            )
        )
        await self.session.flush()

    async def update(self, task: TaskItem) -> None:
        """Copy editable fields of the entity onto its row.

        Raises:
            LookupError: If the row no longer exists.
        """
        model = await self.session.get(TaskItemModel, task.id)
        if model is None:
            raise LookupError(f"TaskItem {task.id} does not exist")

        model.title = task.title
        model.description = task.description
        model.priority = task.priority.value
        model.status = task.status.value
        model.due_date = task.due_date
        model.updated_at = task.updated_at
        await self.session.flush()

    async def delete(self, task_id: UUID) -> None:
        await self.session.execute(
            delete(TaskItemModel).where(TaskItemModel.id == task_id)
        )

    async def list_paged(
        self, criteria: TaskListCriteria
    ) -> tuple[list[TaskItem], int]:
        """Return one page of matching tasks and the total match count.

        Args:
            criteria: Filters, ordering and window.

        Returns:
            Tuple of (tasks on the page, total matching tasks).
        """
        filters: list[ColumnElement[bool]] = []
        if criteria.status is not None:
            filters.append(TaskItemModel.status == criteria.status.value)
        if criteria.priority is not None:
            filters.append(TaskItemModel.priority == criteria.priority.value)
        if criteria.search:
            term = criteria.search.strip()
            filters.append(
                or_(
                    TaskItemModel.title.icontains(term, autoescape=True),
                    TaskItemModel.description.icontains(term, autoescape=True),
                )
            )

        count_stmt = select(func.count()).select_from(TaskItemModel).where(*filters)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(TaskItemModel)
            .where(*filters)
            .order_by(_ORDERINGS[criteria.sort], TaskItemModel.id.asc())
            .offset(criteria.offset)
            .limit(criteria.limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()], total

    async def count_by_status(self) -> dict[TaskStatus, int]:
        stmt = select(TaskItemModel.status, func.count()).group_by(
            TaskItemModel.status
        )
        rows = (await self.session.execute(stmt)).all()
        counts = dict.fromkeys(TaskStatus, 0)
        for status, count in rows:
            counts[TaskStatus(status)] = count
        return counts

    def _to_domain(self, model: TaskItemModel) -> TaskItem:
        return TaskItem(
            id=model.id,
            title=model.title,
            description=model.description,
            priority=Priority(model.priority),
            status=TaskStatus(model.status),
            due_date=model.due_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
