"""Command-line interface."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from adjgraph.export import DotExporter
from adjgraph.graph import Graph, NotFoundError
from adjgraph.loader import GraphConfig, build_graph, load_config, parse_vertex
from adjgraph.logs import fatal, setup_logging, verbosity_level
from adjgraph.watch import Watcher


def main(argv: Optional[List[str]] = None) -> int:
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return 0

    log_level = verbosity_level(args.verbose)
    exit_level = logging.ERROR
    # A bad edit while watching should not stop the watcher.
    if args.keep_going or args.command == "watch":
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    return command(args) or 0


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjgraph", description="tool for inspecting directed graph files"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_show = commands.add_parser("show", help="print the adjacency lists")
    parser_show.add_argument("file", type=Path, help="graph file")

    parser_info = commands.add_parser("info", help="show graph statistics")
    parser_info.add_argument("files", type=Path, nargs="+", help="graph files")

    parser_degree = commands.add_parser("degree", help="show a vertex's out-degree")
    parser_degree.add_argument("file", type=Path, help="graph file")
    parser_degree.add_argument("vertex", help="vertex")

    parser_adjacent = commands.add_parser(
        "adjacent", help="list the targets of a vertex's edges"
    )
    parser_adjacent.add_argument("file", type=Path, help="graph file")
    parser_adjacent.add_argument("vertex", help="source vertex")

    parser_edge = commands.add_parser("edge", help="check whether an edge exists")
    parser_edge.add_argument("file", type=Path, help="graph file")
    parser_edge.add_argument("src", metavar="from", help="source vertex")
    parser_edge.add_argument("dst", metavar="to", help="destination vertex")

    parser_compare = commands.add_parser("compare", help="compare two graphs")
    parser_compare.add_argument("file", type=Path, help="first graph file")
    parser_compare.add_argument("other", type=Path, help="second graph file")
    parser_compare.add_argument(
        "-s", "--strict", action="store_true", help="also compare individual edges"
    )

    parser_export = commands.add_parser("export", help="export to Graphviz DOT")
    parser_export.add_argument("file", type=Path, help="graph file")
    parser_export.add_argument(
        "-o", "--output", type=Path, help="write to a file instead of stdout"
    )

    parser_watch = commands.add_parser(
        "watch", help="print the graph again whenever the file changes"
    )
    parser_watch.add_argument("file", type=Path, help="graph file")

    subparsers = [
        parser_show,
        parser_info,
        parser_degree,
        parser_adjacent,
        parser_edge,
        parser_compare,
        parser_export,
        parser_watch,
    ]
    for subparser in subparsers:
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def open_graph(path: Path) -> Tuple[GraphConfig, Graph[Any]]:
    if not path.is_file():
        fatal("%s: no such file", path)
    cfg = load_config(path)
    return cfg, build_graph(cfg)


def command_show(args: Namespace):
    _, graph = open_graph(args.file)
    if graph.num_vertices():
        graph.dump()


def command_info(args: Namespace):
    printer = InfoPrinter()
    for path in args.files:
        cfg, graph = open_graph(path)
        printer.topic(path)
        print_info(printer, cfg, graph)


def print_info(printer: InfoPrinter, cfg: GraphConfig, graph: Graph[Any]):
    printer.heading("Name")
    printer.item(cfg.name)
    printer.heading("Size")
    printer.item(f"{graph.num_vertices()} vertices")
    printer.item(f"{graph.num_edges()} edges")
    printer.heading("Degrees")
    for vertex in graph.vertices():
        printer.item(f"{vertex}: {graph.degree(vertex)}")


def command_degree(args: Namespace):
    _, graph = open_graph(args.file)
    vertex = parse_vertex(args.vertex)
    try:
        print(graph.degree(vertex))
    except NotFoundError as ex:
        fatal("%s: %s", args.file, ex)


def command_adjacent(args: Namespace):
    _, graph = open_graph(args.file)
    for target in graph.adjacent_to(parse_vertex(args.vertex)):
        print(target)


def command_edge(args: Namespace) -> int:
    _, graph = open_graph(args.file)
    if graph.has_edge(parse_vertex(args.src), parse_vertex(args.dst)):
        print("yes")
        return 0
    print("no")
    return 1


def command_compare(args: Namespace) -> int:
    _, graph = open_graph(args.file)
    _, other = open_graph(args.other)
    if args.strict:
        equal = graph.same_edges(other)
    else:
        equal = graph == other
    print("equal" if equal else "not equal")
    return 0 if equal else 1


def command_export(args: Namespace):
    cfg, graph = open_graph(args.file)
    text = DotExporter().render(graph, cfg.name)
    if args.output:
        logging.info("writing %s", args.output)
        with open(args.output, "w") as f:
            print(text, file=f)
    else:
        print(text)


def command_watch(args: Namespace):
    if not args.file.is_file():
        fatal("%s: no such file", args.file)

    def on_load(graph: Graph[Any]):
        print(f"--- {args.file} ---")
        if graph.num_vertices():
            graph.dump()
        sys.stdout.flush()

    Watcher(args.file, on_load).run()


class InfoPrinter:

    """Helper class for implementing command_info."""

    def __init__(self):
        self.first = True

    def topic(self, s: Any):
        if not self.first:
            print()
        self.first = False
        print(s)

    def heading(self, s: Any):
        print(f"\n    {s}:")

    def item(self, s: Any):
        print(f"    {s}")
