"""Example of routing standard library logging through flatgelf.

Run with:
    python examples/logging_example.py

Every log call is printed to stdout as one GELF JSON object per line.
Set FLATGELF_KEY_NAMING=typed to get type-suffixed field names.
"""

import logging
import sys
from dataclasses import dataclass

from flatgelf import GelfHandler, StreamRecordSink, encode_record, info


@dataclass
class Order:
    order_id: int
    items: list[str]
    paid: bool


def main() -> None:
    logger = logging.getLogger("shop.orders")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(GelfHandler(StreamRecordSink(sys.stdout)))

    order = Order(order_id=1042, items=["book", "lamp"], paid=True)
    logger.info("order placed", extra={"order": order})

    try:
        raise ValueError("card declined")
    except ValueError:
        logger.exception("payment failed", extra={"order_id": order.order_id})

    # Records can also be built directly and encoded by hand.
    print(encode_record(info("stock checked", extra={"sku": "B-17", "left": 3})))


if __name__ == "__main__":
    main()
