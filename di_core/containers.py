from dependency_injector import containers, providers

from calendar_events.services.calendar_event_service import CalendarEventService
from calendar_events.services.recurrence_service import RecurrenceService


class AppContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    recurrence_service = providers.Factory(
        RecurrenceService,
        default_max_instances=config.RECURRENCE_DEFAULT_MAX_INSTANCES,
        strict_rules=config.RECURRENCE_STRICT_RULES,
    )

    calendar_event_service = providers.Factory(
        CalendarEventService,
        recurrence_service=recurrence_service,
        max_generated_instances=config.RECURRENCE_MAX_GENERATED_INSTANCES,
    )


container: AppContainer | None = None  # set during app startup
