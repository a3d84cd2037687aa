"""Example usage of Clicky SDK."""

import logging
from datetime import date

from clicky_sdk import ClickyClient, ClickyResponseError, configure, iter_actions


def main() -> None:
    """Example: Fetch a few reports from the Clicky Stats API."""
    logging.basicConfig(level=logging.DEBUG)
    configure({"site_id": 1234, "sitekey": "your-site-key"})

    with ClickyClient() as client:
        try:
            # Top 10 pages today
            pages = client.reports.pages()
            for page in pages:
                print(f"{page.title}: {page.value} ({page.value_percent}%)")

            # All searches for a date range
            searches = client.reports.searches(
                {"from": date(2024, 1, 1), "to": date(2024, 1, 31)},
                limit=False,
            )
            print(f"Got {len(searches)} search queries")

            # Visitors with custom data
            for visitor in client.reports.visitors_list(date="yesterday"):
                print(visitor.ip_address, visitor.geolocation, visitor.custom)

            # Reports not in the catalog go through get_report
            print(client.get_report("visitors-new", date="last week"))
        except ClickyResponseError as e:
            print(f"Error: {e}")

    for identifier, category, description in iter_actions():
        print(f"[{category}] {identifier}: {description}")


if __name__ == "__main__":
    main()
