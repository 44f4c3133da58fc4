"""
supergrid/__main__.py

Command line access to stored runs.
"""

import argparse
import logging
import sys

from .analysis import analyze_results
from .comparison import chart_energymix_scenarios
from .constants import BARS
from .output import OutputWriter, list_results, load_results


def _scenario_pair(text: str):
    label, sep, runname = text.partition("=")
    if not sep or not label or not runname:
        raise argparse.ArgumentTypeError(f"Expected LABEL=RUNNAME, got '{text}'")
    return label, runname


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supergrid",
        description="Inspect and chart stored supergrid model runs"
    )
    parser.add_argument("--loglevel", type=str, default="INFO", help="Set logging level.")
    commands = parser.add_subparsers(dest="command")

    list_cmd = commands.add_parser("list", help="List stored runs.")
    list_cmd.add_argument("resultsfile", help="Results archive.")
    list_cmd.add_argument("--group", default="", help="Only list runs of this group.")

    chart_cmd = commands.add_parser("chart", help="Chart one stored run.")
    chart_cmd.add_argument("resultsfile", help="Results archive.")
    chart_cmd.add_argument("runname", help="Stored run name.")
    chart_cmd.add_argument("--group", default="", help="Group the run was saved under.")
    chart_cmd.add_argument("--region", default=BARS,
                           help="Region, region group or BARS (default).")
    chart_cmd.add_argument("--export", help="Also write the aggregate tables as CSV to this directory.")

    compare_cmd = commands.add_parser("compare", help="Compare generation mixes of stored runs.")
    compare_cmd.add_argument("resultsfile", help="Results archive.")
    compare_cmd.add_argument("scenarios", nargs="+", type=_scenario_pair,
                             metavar="LABEL=RUNNAME", help="Scenario label and stored run name.")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.loglevel.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "list":
        for key in list_results(args.resultsfile, group=args.group):
            print(key)
    elif args.command == "chart":
        results = load_results(args.runname, resultsfile=args.resultsfile, group=args.group)
        if results is None:
            return 1
        analysis = analyze_results(results)
        if args.export:
            OutputWriter(args.export).write_analysis(analysis)
        analysis.chart(args.region)
    elif args.command == "compare":
        labels = [label for label, _ in args.scenarios]
        runnames = [runname for _, runname in args.scenarios]
        chart_energymix_scenarios(labels, runnames, args.resultsfile)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
