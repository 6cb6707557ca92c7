"""CQRS Registry - Single Source of Truth for Commands and Queries.

Used for:
- Building the dispatcher's HandlerRegistry at startup
- Registry compliance tests (no drift between requests and handlers)

Adding new commands/queries:
1. Define the request dataclass in a *_commands.py / *_queries.py module
2. Create its handler in handlers/
3. Add an entry below (with validators, if any)
4. Run tests - registry compliance tests report what is missing
"""

from tasker.application.cqrs.metadata import CommandMetadata, QueryMetadata

# ═══════════════════════════════════════════════════════════════════════════
# Commands and handlers
# ═══════════════════════════════════════════════════════════════════════════

from tasker.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
)
from tasker.application.commands.task_commands import (
    CreateTaskItem,
    DeleteTaskItem,
    UpdateTaskItem,
)
from tasker.application.commands.handlers.create_task_item_handler import (
    CreateTaskItemHandler,
)
from tasker.application.commands.handlers.delete_task_item_handler import (
    DeleteTaskItemHandler,
)
from tasker.application.commands.handlers.login_user_handler import LoginUserHandler
from tasker.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from tasker.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from tasker.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from tasker.application.commands.handlers.update_task_item_handler import (
    UpdateTaskItemHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Queries and handlers
# ═══════════════════════════════════════════════════════════════════════════

from tasker.application.queries.task_queries import (
    GetTaskItemById,
    GetTaskItemsPaged,
    GetTaskItemStats,
)
from tasker.application.queries.handlers.get_task_item_handler import (
    GetTaskItemHandler,
)
from tasker.application.queries.handlers.get_task_item_stats_handler import (
    GetTaskItemStatsHandler,
)
from tasker.application.queries.handlers.list_task_items_handler import (
    ListTaskItemsHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Validators
# ═══════════════════════════════════════════════════════════════════════════

from tasker.application.validators.auth_validators import (
    LoginUserValidator,
    RefreshTokenPresentValidator,
    RegisterUserValidator,
)
from tasker.application.validators.task_validators import (
    TaskDetailsValidator,
    TaskDueDateValidator,
    TaskIdValidator,
    TaskListingValidator,
)

# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY (7 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # Authentication
    CommandMetadata(
        command_class=RegisterUser,
        handler_class=RegisterUserHandler,
        validators=(RegisterUserValidator,),
    ),
    CommandMetadata(
        command_class=LoginUser,
        handler_class=LoginUserHandler,
        validators=(LoginUserValidator,),
    ),
    CommandMetadata(
        command_class=RefreshAccessToken,
        handler_class=RefreshAccessTokenHandler,
        validators=(RefreshTokenPresentValidator,),
    ),
    CommandMetadata(
        command_class=LogoutUser,
        handler_class=LogoutUserHandler,
        validators=(RefreshTokenPresentValidator,),
    ),
    # Tasks
    CommandMetadata(
        command_class=CreateTaskItem,
        handler_class=CreateTaskItemHandler,
        validators=(TaskDetailsValidator, TaskDueDateValidator),
    ),
    CommandMetadata(
        command_class=UpdateTaskItem,
        handler_class=UpdateTaskItemHandler,
        validators=(TaskIdValidator, TaskDetailsValidator, TaskDueDateValidator),
    ),
    CommandMetadata(
        command_class=DeleteTaskItem,
        handler_class=DeleteTaskItemHandler,
        validators=(TaskIdValidator,),
    ),
]

# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY (3 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetTaskItemById,
        handler_class=GetTaskItemHandler,
    ),
    QueryMetadata(
        query_class=GetTaskItemsPaged,
        handler_class=ListTaskItemsHandler,
        validators=(TaskListingValidator,),
    ),
    QueryMetadata(
        query_class=GetTaskItemStats,
        handler_class=GetTaskItemStatsHandler,
    ),
]
