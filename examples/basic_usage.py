#!/usr/bin/env python3
"""Basic usage example"""

from stability_log import LoggerBuilder, LogLevel
from stability_log.writers import MemoryStore


class Order:
    def __init__(self, order_id, total):
        self.order_id = order_id
        self.total = total

    @property
    def log_detail(self):
        return f"Order #{self.order_id} total={self.total:.2f}"


def main():
    store = MemoryStore(max_entries=1000)

    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.VERBOSE)
        .with_console(colored=True)
        .with_store(store)
        .build())

    # Log messages
    logger.verbose("This is verbose")
    logger.info("Application started")
    logger.warning("Cart is getting large", Order(17, 249.5))
    logger.error("Payment declined", Order(17, 249.5))
    logger.print("Routed through the error level")

    # Flush and shutdown
    logger.flush()
    logger.shutdown()

    print(f"{len(store)} entries stored")

if __name__ == "__main__":
    main()
