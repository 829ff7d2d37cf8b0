"""Excel export of standings and weekly results."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .ranking import rank_week_results
from .schemas import LeagueData
from .scoring import compute_week_team_results
from .standings import compute_standings

logger = logging.getLogger('golfleague.export')

NO_SCORE = '–'
STANDINGS_SHEET = 'Standings'
WEEK_HEADERS = ['Rank', 'Team', 'Total', 'League Pts', 'Adjusted', 'Player', 'Score']


def _header(ws, headers: list[str]) -> None:
    for col_idx, header in enumerate(headers, start=1):
        ws.cell(row=1, column=col_idx, value=header).font = Font(bold=True)


def write_standings_sheet(ws, league: LeagueData) -> None:
    """Fill a sheet with the overall standings table."""
    weeks = league.config.number_of_weeks
    _header(ws, ['Rank', 'Team'] + [f'Week {n}' for n in range(1, weeks + 1)] + ['Total'])

    for row_idx, row in enumerate(compute_standings(league), start=2):
        ws.cell(row=row_idx, column=1, value=row.rank)
        ws.cell(row=row_idx, column=2, value=row.team_name)
        for col_idx, total in enumerate(row.weekly_totals, start=3):
            ws.cell(row=row_idx, column=col_idx, value=NO_SCORE if total is None else total)
        ws.cell(row=row_idx, column=weeks + 3, value=row.overall_total)


def write_week_sheet(ws, league: LeagueData, week_number: int) -> None:
    """
    Fill a sheet with one week's results.

    Ranked teams come first in finishing order, followed by teams with no
    scores. Each player gets a row; counting scores are bold.
    """
    _header(ws, WEEK_HEADERS)

    team_results = compute_week_team_results(league, week_number)
    ranked = {r.team_id: r for r in rank_week_results(team_results, league.config, week_number)}
    order = list(ranked)
    team_results.sort(key=lambda r: order.index(r.team_id) if r.team_id in ranked else len(order))

    row_idx = 2
    for result in team_results:
        league_result = ranked.get(result.team_id)
        if league_result is not None:
            ws.cell(row=row_idx, column=1, value=league_result.rank)
            ws.cell(row=row_idx, column=4, value=league_result.league_points)
            ws.cell(row=row_idx, column=5, value=league_result.adjusted_league_points)
            ws.cell(row=row_idx, column=3, value=result.counting_total)
        ws.cell(row=row_idx, column=2, value=result.team_name)

        for entry in result.all_scores or [None]:
            if entry is not None:
                ws.cell(row=row_idx, column=6, value=entry.player_name)
                score_cell = ws.cell(
                    row=row_idx, column=7, value=NO_SCORE if entry.score is None else entry.score
                )
                if entry.counting:
                    score_cell.font = Font(bold=True)
            row_idx += 1


def export_standings_workbook(league: LeagueData, excel_path: Path | str) -> Path:
    """
    Write standings and every configured week to an Excel workbook.

    Args:
        league: League snapshot
        excel_path: Output .xlsx path (overwritten if it exists)

    Returns:
        Path of the written workbook
    """
    excel_path = Path(excel_path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = STANDINGS_SHEET
    write_standings_sheet(ws, league)

    for week_number in range(1, league.config.number_of_weeks + 1):
        write_week_sheet(wb.create_sheet(f'Week {week_number}'), league, week_number)

    wb.save(excel_path)
    wb.close()
    logger.info(f'Standings exported to {excel_path}')
    return excel_path
