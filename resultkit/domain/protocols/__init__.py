"""Domain protocols (ports).

Structural interfaces the core and observers depend on; infrastructure
provides the adapters.
"""

from resultkit.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from resultkit.domain.protocols.logger_protocol import LoggerProtocol
from resultkit.domain.protocols.result_messages_protocol import ResultMessagesProtocol
from resultkit.domain.protocols.unit_of_work_protocol import (
    UnitOfWorkProtocol,
    UnitOfWorkResolver,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "ResultMessagesProtocol",
    "UnitOfWorkProtocol",
    "UnitOfWorkResolver",
]
