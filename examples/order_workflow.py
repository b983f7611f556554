"""Wire a small order workflow onto a dispatcher.

Run ``eventdispatch-inspect examples.order_workflow`` from the repository
root to see the resulting registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from eventdispatch import Event, EventDispatcher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OrderCreated(Event):
    order_id: str = ""
    total: float = 0.0
    notes: list[str] = field(default_factory=list)


def reject_empty_orders(event: OrderCreated, name: str) -> None:
    if event.total <= 0:
        event.notes.append("rejected")
        event.stop_propagation()


def reserve_stock(event: OrderCreated, name: str) -> None:
    event.notes.append("stock reserved")


def send_confirmation(event: OrderCreated, name: str) -> None:
    event.notes.append("confirmation sent")
    logger.info("Order %s confirmed", event.order_id)


def register(dispatcher: EventDispatcher) -> None:
    dispatcher.add_listener("order.created", reject_empty_orders, priority=-10)
    dispatcher.add_listener("order.created", reserve_stock, priority=0)
    dispatcher.add_listener("order.created", send_confirmation, priority=10)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    dispatcher = EventDispatcher()
    register(dispatcher)
    for total in (42.0, 0.0):
        order = OrderCreated(order_id=f"order-{total:g}", total=total)
        dispatcher.dispatch(order, "order.created")
        print(order.order_id, order.notes)
