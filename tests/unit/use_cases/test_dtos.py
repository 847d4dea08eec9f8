"""Unit tests for shared DTO helpers"""

import pytest
from decimal import Decimal

from src.app.use_cases.dtos import PageQueryDTO, format_decimal
from src.app.use_cases.orders.dtos import InvoiceResponseDTO
from src.domain.pricing import InvoiceLine, OrderInvoice


class TestFormatDecimal:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("850.0000"), "850.00"),
            (Decimal("900"), "900.00"),
            (Decimal("0"), "0.00"),
            (Decimal("9.9"), "9.90"),
            (Decimal("0.466690"), "0.46669"),
            (Decimal("1E+3"), "1000.00"),
        ],
    )
    def test_two_places_unless_more_are_needed(self, value, expected):
        assert format_decimal(value) == expected


class TestInvoiceResponseSerialization:

    def test_amounts_are_sent_as_strings(self):
        invoice = OrderInvoice(
            lines=[
                InvoiceLine(
                    product_name="Widget",
                    quantity=10,
                    discount_percent=Decimal("15.00"),
                    amount=Decimal("850.0000"),
                )
            ],
            total_amount=Decimal("850.0000"),
        )

        data = InvoiceResponseDTO.from_invoice(invoice).model_dump(mode="json", by_alias=True)

        assert data["products"][0]["amount"] == "850.00"
        assert data["products"][0]["discountPercent"] == "15.00"
        assert data["totalAmount"] == "850.00"

    def test_python_values_stay_decimal(self):
        invoice = OrderInvoice(lines=[], total_amount=Decimal("12.5"))

        dto = InvoiceResponseDTO.from_invoice(invoice)

        assert dto.total_amount == Decimal("12.5")


class TestPageQueryBounds:

    def test_page_beyond_32_bit_is_rejected(self):
        with pytest.raises(ValueError):
            PageQueryDTO(page=2**31, page_size=10)
