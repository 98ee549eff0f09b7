"""Basic usage example: rank a competition and export its session table."""

import sys

from raceranking import RankingService, format_milliseconds
from raceranking.config import Settings
from raceranking.sources import HttpCompetitionSource


def main(slug: str) -> None:
    settings = Settings.from_env()
    with HttpCompetitionSource(settings.base_url, settings.timeout) as source:
        service = RankingService(source)

        ranking = service.get_competition_ranking(slug)
        if ranking is None:
            print(f"No data for competition {slug!r}.")
            return

        print(f"=== {ranking.competition.name or slug} ===")
        for item in ranking.items:
            total = format_milliseconds(item.total) if item.total else "-"
            flag = "" if item.is_valid else " (incomplete)"
            print(f"  {item.position:>3}. #{item.driver_id} {total}{flag}")

        csv_text = service.get_competition_sessions_csv(slug)
        if csv_text:
            with open(f"{slug}-sessions.csv", "w", encoding="utf-8") as fh:
                fh.write(csv_text)
            print(f"\nSession table written to {slug}-sessions.csv")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "quali-2024-round-1")
