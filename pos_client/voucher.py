"""Voucher binding: at most one voucher attached to the order."""

from typing import Iterable, Optional

import structlog

from .state import Voucher, VoucherBinding

logger = structlog.get_logger()


class VoucherSlot:
    """Holds the single active voucher binding, if any.

    Eligibility is decided by whoever lists vouchers; :meth:`apply` binds
    whatever it is handed and replaces any previous binding.
    """

    def __init__(self) -> None:
        self._binding: Optional[VoucherBinding] = None
        self.log = logger.bind(component="voucher")

    @property
    def binding(self) -> Optional[VoucherBinding]:
        return self._binding

    def apply(self, voucher) -> VoucherBinding:
        binding = VoucherBinding.of(voucher)
        if self._binding is not None and self._binding.id != binding.id:
            self.log.info("replacing_voucher", previous=self._binding.code, code=binding.code)
        else:
            self.log.info("applying_voucher", code=binding.code)
        self._binding = binding
        return binding

    def remove(self) -> None:
        if self._binding is not None:
            self.log.info("removing_voucher", code=self._binding.code)
        self._binding = None


def eligible(vouchers: Iterable[Voucher]) -> list[Voucher]:
    """Vouchers that may be offered for selection."""
    return [v for v in vouchers if v.is_active]
