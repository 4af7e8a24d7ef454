import typer

from baccarat_roads.config import settings
from baccarat_roads.core.validation import parse_outcomes
from baccarat_roads.observability import setup_logging
from baccarat_roads.roads.grid import InvalidGridDimensions
from baccarat_roads.roads.prediction import DERIVED_ROADS
from baccarat_roads.services import RoadSession


app = typer.Typer(help="Big road and derived roads for a baccarat shoe.")


def _session(history: str, rows: int, columns: int) -> RoadSession:
    setup_logging(settings.log_level, settings.log_format)
    try:
        session = RoadSession(rows=rows, columns=columns)
    except InvalidGridDimensions as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    session.extend(parse_outcomes(history))
    return session


def _label(v):
    return {True: "red", False: "blue", None: "-"}[v]


@app.command()
def show(history: str, rows: int = typer.Option(settings.rows), columns: int = typer.Option(settings.columns)):
    """Print big road column lengths, derived marks and next-mark predictions."""
    snap = _session(history, rows, columns).snapshot()
    c = snap["counts"]
    typer.echo(f"rounds: {c['total']}  banker: {c['banker_win']}  player: {c['player_win']}  tie: {c['tie']}")
    typer.echo(f"big road: {snap['big_road']}")
    for name, marks in snap["derived"].items():
        b = snap["predictions"]["banker"][name] or "-"
        p = snap["predictions"]["player"][name] or "-"
        typer.echo(f"{name:<10} {' '.join(marks) or '-'}  (banker next: {b}, player next: {p})")


@app.command()
def predict(history: str, road: str = typer.Option("big_eye", help="big_eye | small | cockroach"),
            rows: int = typer.Option(settings.rows), columns: int = typer.Option(settings.columns)):
    """Colour of the next mark on one derived road for a banker and a player win."""
    if road not in DERIVED_ROADS:
        typer.echo(f"unknown road {road!r}, expected one of {', '.join(DERIVED_ROADS)}", err=True)
        raise typer.Exit(code=1)
    derived = _session(history, rows, columns).derived_roads[road]
    typer.echo(f"banker: {_label(derived.banker_prediction)}")
    typer.echo(f"player: {_label(derived.player_prediction)}")


if __name__ == "__main__":
    app()
