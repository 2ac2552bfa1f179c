"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from tgraph.config import CONFIG_NAME, VALUE_TYPES, GraphConfig
from tgraph.errors import GraphFileError
from tgraph.files import create_workspace, find_config
from tgraph.graph import Graph
from tgraph.logs import fatal, setup_logging, verbosity_level
from tgraph.report import Reporter
from tgraph.watch import Watcher


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    setup_logging(sys.stderr, verbosity_level(args.verbose), logging.ERROR)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="tgraph", description="tool for inspecting trivial graph format files"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_init = commands.add_parser("init", help="create a new workspace")
    parser_init.add_argument("name", help="workspace directory name")

    parser_show = commands.add_parser(
        "show", help="show vertices and their neighbours in BFS order"
    )
    parser_show.add_argument(
        "-w", "--watch", action="store_true", help="show again when the file changes"
    )

    parser_bfs = commands.add_parser("bfs", help="print vertex ids in BFS order")

    parser_check = commands.add_parser("check", help="validate a graph file")

    for subparser in [parser_show, parser_bfs, parser_check]:
        subparser.add_argument(
            "file", nargs="?", help="graph file (default: input from tgraph.yml)"
        )
        subparser.add_argument(
            "--vertex-type", choices=VALUE_TYPES.keys(), help="vertex value type"
        )
        subparser.add_argument(
            "--edge-type", choices=VALUE_TYPES.keys(), help="edge value type"
        )

    for subparser in [parser_init, parser_show, parser_bfs, parser_check]:
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_config() -> GraphConfig:
    """Load tgraph.yml if there is one, else use defaults."""
    path = find_config()
    if path is None:
        logging.debug("no %s found, using defaults", CONFIG_NAME)
        return GraphConfig.default()
    cfg = GraphConfig.load(path)
    cfg.validate()
    logging.debug("config: %r", cfg)
    return cfg


class Source:

    """The graph file and value types selected by config and arguments."""

    def __init__(self, args: Namespace):
        cfg = load_config()
        self.path = Path(args.file) if args.file else cfg.input_path()
        self.vertex_type = self._value_type(cfg, args.vertex_type, "vertex_type")
        self.edge_type = self._value_type(cfg, args.edge_type, "edge_type")

    @staticmethod
    def _value_type(cfg: GraphConfig, name: Optional[str], key: str) -> Callable[[str], Any]:
        if name:
            return VALUE_TYPES[name]
        return cfg.value_type(key)

    def load(self) -> Graph:
        """Deserialize the graph, exiting with a fatal log on failure."""
        try:
            return self.try_load()
        except GraphFileError as ex:
            fatal("%s", ex)

    def try_load(self) -> Graph:
        return Graph.deserialize_from(self.path, self.vertex_type, self.edge_type)


def command_init(args: Namespace):
    print(f"Creating a new graph workspace in {args.name}/")
    create_workspace(Path.cwd(), args.name)


def command_show(args: Namespace):
    source = Source(args)
    reporter = Reporter()
    if not args.watch:
        print(f"Deserializing {source.path}...")
        graph = source.load()
        print("Deserialization finished!\n")
        print(reporter.show(graph), end="")
        return

    def show():
        try:
            graph = source.try_load()
        except GraphFileError as ex:
            # Keep watching: the file may be mid-edit.
            logging.warning("%s", ex)
            return
        print(reporter.show(graph), end="", flush=True)

    Watcher(source.path, show).run()


def command_bfs(args: Namespace):
    graph = Source(args).load()
    for vid in graph.traverse_bfs():
        print(vid)


def command_check(args: Namespace):
    source = Source(args)
    graph = source.load()
    print(Reporter().check(graph, source.path), end="")
