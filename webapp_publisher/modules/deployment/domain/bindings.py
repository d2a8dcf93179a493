"""Function binding kinds resolved from plain string identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

HTTP_OUTPUT_DEFAULT_NAME = "$return"

DIRECTION_IN = "in"
DIRECTION_OUT = "out"


@dataclass(frozen=True)
class BindingKind:
    """A known binding kind with its wire type and direction."""

    name: str
    type: str
    direction: str


KNOWN_BINDING_KINDS: Tuple[BindingKind, ...] = (
    BindingKind("HttpTrigger", "httpTrigger", DIRECTION_IN),
    BindingKind("HttpOutput", "http", DIRECTION_OUT),
    BindingKind("BlobTrigger", "blobTrigger", DIRECTION_IN),
    BindingKind("BlobInput", "blob", DIRECTION_IN),
    BindingKind("BlobOutput", "blob", DIRECTION_OUT),
    BindingKind("QueueTrigger", "queueTrigger", DIRECTION_IN),
    BindingKind("QueueOutput", "queue", DIRECTION_OUT),
    BindingKind("TableInput", "table", DIRECTION_IN),
    BindingKind("TableOutput", "table", DIRECTION_OUT),
    BindingKind("TimerTrigger", "timerTrigger", DIRECTION_IN),
    BindingKind("EventHubTrigger", "eventHubTrigger", DIRECTION_IN),
    BindingKind("EventHubOutput", "eventHub", DIRECTION_OUT),
    BindingKind("CosmosDBInput", "cosmosDB", DIRECTION_IN),
    BindingKind("CosmosDBOutput", "cosmosDB", DIRECTION_OUT),
    BindingKind("ServiceBusQueueTrigger", "serviceBusTrigger", DIRECTION_IN),
    BindingKind("ServiceBusTopicTrigger", "serviceBusTrigger", DIRECTION_IN),
    BindingKind("ServiceBusQueueOutput", "serviceBus", DIRECTION_OUT),
    BindingKind("ServiceBusTopicOutput", "serviceBus", DIRECTION_OUT),
    BindingKind("EventGridTrigger", "eventGridTrigger", DIRECTION_IN),
    BindingKind("SendGridOutput", "sendGrid", DIRECTION_OUT),
    BindingKind("TwilioSmsOutput", "twilioSms", DIRECTION_OUT),
)

# Lower-cased kind identifier -> kind
BINDING_KINDS: Dict[str, BindingKind] = {kind.name.lower(): kind for kind in KNOWN_BINDING_KINDS}


@dataclass
class Binding:
    kind: BindingKind
    name: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.kind.type

    @property
    def direction(self) -> str:
        return self.kind.direction


def get_binding(kind_id: str, **attributes: Any) -> Optional[Binding]:
    """Resolve ``kind_id`` case-insensitively; unknown identifiers yield ``None``."""
    kind = BINDING_KINDS.get((kind_id or "").lower())
    if kind is None:
        return None
    name = attributes.pop("name", None)
    return Binding(kind=kind, name=name, attributes=attributes)


def get_http_out_binding() -> Binding:
    return Binding(kind=BINDING_KINDS["httpoutput"], name=HTTP_OUTPUT_DEFAULT_NAME)
