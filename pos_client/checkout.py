"""Checkout: turn the in-progress order into a recorded transaction.

The transition has two states. ``IDLE`` accepts a submit; ``SUBMITTING``
lasts while the recorder is working. The payload is snapshotted before the
recorder is called, and the session is only reset once the recorder has
returned a transaction code. A failed submission leaves the session exactly
as it was so the cashier can retry.
"""

import dataclasses
from enum import Enum
from typing import Protocol

import structlog

from .errors import CheckoutInProgressError, ClientError, EmptyOrderError
from .session import OrderSession
from .state import CheckoutReceipt, TransactionPayload

logger = structlog.get_logger()


class CheckoutState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class TransactionRecorder(Protocol):
    def record(self, payload: TransactionPayload) -> str:
        """Record ``payload`` and return the server-assigned transaction code.

        Raises SubmissionRejectedError or TransportError on failure.
        """
        ...


class Checkout:
    def __init__(self, session: OrderSession, recorder: TransactionRecorder):
        self.session = session
        self.recorder = recorder
        self.state = CheckoutState.IDLE
        self.log = logger.bind(component="checkout")

    @property
    def is_submitting(self) -> bool:
        return self.state == CheckoutState.SUBMITTING

    def submit(self) -> CheckoutReceipt:
        """Submit the current order.

        Raises:
            EmptyOrderError: the order has no lines; nothing is sent.
            CheckoutInProgressError: a submission is already in flight.
            SubmissionRejectedError: the backend refused the transaction.
            TransportError: the backend could not be reached.
        """
        if self.is_submitting:
            raise CheckoutInProgressError()
        if self.session.is_empty:
            self.log.info("checkout_refused", reason="empty_order")
            raise EmptyOrderError()

        self.state = CheckoutState.SUBMITTING
        try:
            payload = self.session.build_payload()
            totals = self.session.totals
            lines = tuple(dataclasses.replace(line) for line in self.session.lines)

            log = self.log.bind(total=str(payload.total), items=len(payload.items))
            log.info("submitting_transaction")
            try:
                code = self.recorder.record(payload)
            except ClientError as e:
                log.warning("transaction_failed", error=str(e), error_type=type(e).__name__)
                raise

            log.info("transaction_recorded", transaction_code=code)
            self.session.clear()
            return CheckoutReceipt(
                transaction_code=code,
                payment_method=payload.payment_method,
                totals=totals,
                lines=lines,
            )
        finally:
            self.state = CheckoutState.IDLE
