"""
Print a user's special prices and the catalog as that user sees it.

Usage:
    python scripts/check_special_prices.py user-1
    python scripts/check_special_prices.py user-1 --only-special
"""

import argparse
import sys
from pathlib import Path

# Add backend to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from services.special_price_service import get_special_price_service


def check_user(user_id: str, only_special: bool = False) -> int:
    """Print overrides and effective prices. Returns number of overrides."""
    special_price_service = get_special_price_service()

    special_prices = special_price_service.get_by_user(user_id)

    print("=" * 60)
    print(f"SPECIAL PRICES FOR {user_id}")
    print("=" * 60)

    if not special_prices:
        print("  (none)")
    for sp in special_prices:
        print(f"  {sp.product_sku:<20} {sp.price:>10}")

    print("\nEFFECTIVE CATALOG")
    print("-" * 60)

    for product in special_price_service.get_catalog(user_id):
        if only_special and not product.has_special_price:
            continue
        marker = "*" if product.has_special_price else " "
        print(f"{marker} {product.sku:<20} {product.name[:25]:<25} {product.price:>10}")

    return len(special_prices)


def main():
    parser = argparse.ArgumentParser(
        description="Show a user's special prices and effective catalog"
    )
    parser.add_argument("user_id", help="User identifier")
    parser.add_argument(
        "--only-special",
        action="store_true",
        help="Only list products priced by an override"
    )
    args = parser.parse_args()

    check_user(args.user_id, only_special=args.only_special)


if __name__ == "__main__":
    main()
