"""
Command-line interface for the ERG cardiovascular risk calculator.

Collects one patient's data from options, runs the ERG-SBC assessment and
prints the risk, heart age, factor analysis and recommendations.
"""

import logging
import sys
import typing

import click

from .assessment import Assessment, ComparisonLevel, assess
from .patient import ValidationError
from .report import analysis_table, format_heart_age, format_percent, render_analysis_table


@click.group()
def main():
    """ERG: cardiovascular risk scoring with the ERG-SBC point tables."""
    pass


@main.command(name="assess")
@click.option("--sex", type=click.Choice(["M", "F"], case_sensitive=False), help="M or F")
@click.option("--age", type=str, help="age in years (30-80)")
@click.option("--cholesterol", type=str, help="total cholesterol in mg/dL (100-400)")
@click.option("--hdl", type=str, help="HDL cholesterol in mg/dL (20-100)")
@click.option("--statin/--no-statin", default=False, help="patient takes a statin")
@click.option("--systolic", type=str, help="systolic blood pressure in mmHg (90-200)")
@click.option("--treated/--untreated", default=False, help="on antihypertensive treatment")
@click.option("--smoker/--non-smoker", default=False, help="current smoker")
@click.option("--diabetic/--non-diabetic", default=False, help="has diabetes")
@click.option("--verbose-logging", is_flag=True, help="Also emit debug logs to stderr")
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def assess_command(
    sex: typing.Optional[str],
    age: typing.Optional[str],
    cholesterol: typing.Optional[str],
    hdl: typing.Optional[str],
    statin: bool,
    systolic: typing.Optional[str],
    treated: bool,
    smoker: bool,
    diabetic: bool,
    verbose_logging: bool,
    log_file_path: typing.Optional[str],
):
    """
    Compute the 10-year risk, heart age and recommendations for one patient.
    Numeric values are checked together, so every out-of-range field is reported.
    """
    _configure_logging(verbose_logging, log_file_path)

    raw = {
        "sex": sex,
        "age": age,
        "cholesterol": cholesterol,
        "hdl": hdl,
        "statin": statin,
        "systolic": systolic,
        "treated": treated,
        "smoker": smoker,
        "diabetic": diabetic,
    }
    try:
        result = assess(raw)
    except ValidationError as e:
        click.echo(click.style("Invalid patient data:", fg="red"), err=True)
        for message in e.errors:
            click.echo(click.style(f"- {message}", fg="red"), err=True)
        sys.exit(1)

    _print_assessment(result)


def _configure_logging(verbose_logging: bool, log_file_path: typing.Optional[str]) -> None:
    handlers: list[logging.Handler] = []
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    if verbose_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose_logging else logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )


def _comparison_text(result: Assessment) -> str:
    comparison = result.comparison
    if comparison.level is ComparisonLevel.IDEAL:
        return click.style("Excellent! Your risk is at the ideal level", fg="green")
    color = "red" if comparison.level is ComparisonLevel.HIGHER else "yellow"
    return (
        click.style(f"Your risk is {comparison.ratio:.1f}x the ideal", fg=color)
        + f" (+{comparison.absolute_difference:.1f}% absolute, "
        + f"+{comparison.relative_increase}% relative to the ideal profile)"
    )


def _print_assessment(result: Assessment) -> None:
    click.echo(f"10-year risk:      {format_percent(result.actual_risk.percent)}")
    click.echo(f"Ideal risk:        {format_percent(result.ideal_risk.percent)}")
    click.echo(_comparison_text(result))
    click.echo("")
    click.echo(f"Heart age:         {format_heart_age(result.actual_risk.heart_age)}")
    click.echo(f"Chronological age: {result.patient.age} years")
    click.echo(f"Total points:      {result.actual.total} points")
    click.echo(f"Ideal points:      {result.ideal.total} points")
    click.echo("")
    click.echo(render_analysis_table(analysis_table(result)))
    click.echo("")
    click.echo("Recommendations:")
    for index, advice in enumerate(result.recommendations, start=1):
        click.echo(f"  {index}. {advice}")


if __name__ == "__main__":
    main()
