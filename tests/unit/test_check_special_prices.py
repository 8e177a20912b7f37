"""
Unit tests for the check_special_prices operator script.

Run: pytest tests/unit/test_check_special_prices.py -v
"""

from scripts.check_special_prices import check_user

from tests.factories import SpecialPriceFactory


class TestCheckUser:
    """Tests for check_user()"""

    def test_prints_overrides_and_marks_special_products(self, catalog_db, capsys):
        catalog_db.set_table_data("special_prices", [
            SpecialPriceFactory.create(user_id="u1", product_sku="A1", price=80)
        ])

        count = check_user("u1")

        out = capsys.readouterr().out
        assert count == 1
        assert "SPECIAL PRICES FOR u1" in out
        assert "* A1" in out
        assert "  B2" in out

    def test_only_special_hides_list_priced_products(self, catalog_db, capsys):
        catalog_db.set_table_data("special_prices", [
            SpecialPriceFactory.create(user_id="u1", product_sku="A1", price=80)
        ])

        check_user("u1", only_special=True)

        out = capsys.readouterr().out
        assert "* A1" in out
        assert "B2" not in out

    def test_user_without_overrides(self, catalog_db, capsys):
        count = check_user("u9")

        assert count == 0
        assert "(none)" in capsys.readouterr().out
