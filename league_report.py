#!/usr/bin/env python3
"""
Golf League Report CLI

Prints standings and weekly results for the league, validates the stored
snapshot, or exports everything to Excel.

Usage:
    python league_report.py standings
    python league_report.py week 3
    python league_report.py validate --data-file data/league.json
    python league_report.py export standings.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

from golfleague import (
    JsonFileStore,
    compute_standings,
    compute_week_team_results,
    export_standings_workbook,
    get_store,
    get_week_statuses,
    rank_week_results,
    validate_league,
)
from golfleague.logging_config import setup_logging
from golfleague.schemas import LeagueData

NO_SCORE = '–'


def format_points(points: float | None) -> str:
    if points is None:
        return NO_SCORE
    return f'{points:g}'


def print_standings(league: LeagueData) -> None:
    config = league.config
    print(f'\n{config.league_name} ({config.scoring_format.value}, best {config.best_scores_count})')
    print('=' * 60)

    weeks = [f'W{n}' for n in range(1, config.number_of_weeks + 1)]
    print(f"{'#':>3}  {'Team':<24}" + ''.join(f'{w:>6}' for w in weeks) + f"{'Total':>8}")
    for row in compute_standings(league):
        totals = ''.join(f'{format_points(t):>6}' for t in row.weekly_totals)
        print(f'{row.rank:>3}  {row.team_name:<24}{totals}{format_points(row.overall_total):>8}')

    print()
    for status in get_week_statuses(league):
        print(f'  Week {status.week_number}: {status.score_count}/{status.player_count} scores entered')


def print_week(league: LeagueData, week_number: int) -> None:
    config = league.config
    team_results = compute_week_team_results(league, week_number)
    ranked = {r.team_id: r for r in rank_week_results(team_results, config, week_number)}

    print(f'\nWeek {week_number} of {config.number_of_weeks}')
    print('=' * 60)
    if not ranked:
        print('  No scores entered.')

    for league_result in ranked.values():
        line = (
            f'  {league_result.rank}. {league_result.team_name}: {league_result.score_total} '
            f'({format_points(league_result.adjusted_league_points)} league pts'
        )
        if league_result.adjusted_league_points != league_result.league_points:
            line += ', doubled'
        print(line + ')')

    for result in team_results:
        print(f'\n  {result.team_name}')
        for entry in result.all_scores:
            marker = '*' if entry.counting else ' '
            score = NO_SCORE if entry.score is None else entry.score
            print(f'    {marker} {entry.player_name:<24}{score:>5}')


def main():
    parser = argparse.ArgumentParser(description="Golf league standings and reports")
    parser.add_argument(
        "--data-file", "-f",
        default=None,
        help="League JSON snapshot to read (defaults to the configured store)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show errors",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("standings", help="Print overall standings")
    week_parser = subparsers.add_parser("week", help="Print one week's results")
    week_parser.add_argument("week", type=int, help="Week number")
    subparsers.add_parser("validate", help="Check the league data for problems")
    export_parser = subparsers.add_parser("export", help="Export to an Excel workbook")
    export_parser.add_argument("output", help="Output .xlsx path")

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    setup_logging(level=level)

    if args.data_file:
        data_path = Path(args.data_file)
        if not data_path.exists():
            print(f"❌ League file not found: {data_path}")
            sys.exit(1)
        store = JsonFileStore(data_path)
    else:
        store = get_store()

    league = store.read()

    if args.command == "standings":
        print_standings(league)
    elif args.command == "week":
        print_week(league, args.week)
    elif args.command == "validate":
        errors, warnings = validate_league(league)
        for warning in warnings:
            print(f"⚠️  {warning}")
        for error in errors:
            print(f"❌ {error}")
        if errors:
            sys.exit(1)
        print("✓ League data is consistent")
    elif args.command == "export":
        path = export_standings_workbook(league, args.output)
        print(f"Workbook saved to {path}")


if __name__ == "__main__":
    main()
