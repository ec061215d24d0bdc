"""
wordgraph command-line interface.

Builds the graph from a text file once, then runs one analysis per
invocation, or an interactive menu that keeps the graph in memory:
- show / stats: graph description and statistics
- bridge / generate: bridge words
- path / rank / walk: shortest path, PageRank, random walk
- interactive: numbered menu over all of the above
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from ..analysis import validate_damping_factor
from ..config import WordGraphConfig, load_config
from ..library import WordGraphError, WordGraphSession
from ..output import format_walk, save_walk

logger = logging.getLogger(__name__)

DAMPING_ERROR = "Damping factor must be a number between 0 and 1!"

MENU = """Choose a function:
1. Show directed graph
2. Query bridge words
3. Generate new text
4. Shortest path
5. PageRank
6. Random walk
7. Exit"""


class WordGraphCLI:
    """
    Command-line interface for word-graph analysis.

    ``input_func`` feeds the interactive menu; tests replace it with a
    scripted iterator.
    """

    def __init__(self, input_func: Callable[[str], str] = input):
        self.input_func = input_func
        self.config: WordGraphConfig = WordGraphConfig()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create command-line argument parser."""
        parser = argparse.ArgumentParser(
            prog='wordgraph',
            description='Word-adjacency graph analysis of a text file'
        )

        parser.add_argument(
            'source',
            type=Path,
            help='Text file to build the word graph from'
        )

        parser.add_argument(
            '--config', '-c',
            type=Path,
            help='YAML configuration file'
        )

        parser.add_argument(
            '--seed',
            type=int,
            help='Seed for bridge-word insertion and random walks'
        )

        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable debug logging'
        )

        commands = parser.add_subparsers(dest='command', required=True)

        show = commands.add_parser('show', help='Print the graph as Graphviz DOT')
        show.add_argument(
            '--render',
            action='store_true',
            help='Also write the DOT file and render it to PNG with Graphviz'
        )

        commands.add_parser('stats', help='Print graph statistics')

        bridge = commands.add_parser('bridge', help='Query bridge words between two words')
        bridge.add_argument('word1')
        bridge.add_argument('word2')

        generate = commands.add_parser('generate', help='Insert bridge words into new text')
        generate.add_argument('text', nargs='+')

        path = commands.add_parser('path', help='Shortest path between two words')
        path.add_argument('word1')
        path.add_argument('word2')

        rank = commands.add_parser('rank', help='PageRank of every word')
        rank.add_argument(
            '--damping', '-d',
            type=str,
            help='Damping factor in [0, 1] (default: from config, 0.85)'
        )

        walk = commands.add_parser('walk', help='Random walk over the graph')
        walk.add_argument(
            '--save',
            nargs='?',
            const='',
            default=None,
            help='Write the walk to PATH (default file: random_walk.txt)'
        )

        commands.add_parser('interactive', help='Interactive menu')

        return parser

    def setup_logging(self, verbose: bool):
        level = logging.DEBUG if verbose else getattr(logging, str(self.config.log_level).upper(), logging.WARNING)
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    def load_session(self, args: argparse.Namespace) -> WordGraphSession:
        self.config = load_config(args.config)
        if args.seed is not None:
            self.config.seed = args.seed
        self.setup_logging(args.verbose)
        return WordGraphSession.from_file(args.source, self.config)

    # Command handlers

    def cmd_show(self, session: WordGraphSession, render: bool) -> int:
        print(session.show_directed_graph())
        if render:
            return self._render(session)
        return 0

    def _render(self, session: WordGraphSession) -> int:
        result = session.render_graph()
        if result.is_failure:
            print(f"Warning: Graph rendering failed: {result.error}", file=sys.stderr)
            return 1
        output = result.value
        print(f"DOT file written to {output.dot_path}")
        print(f"Graph image rendered to {output.image_path}")
        return 0

    def cmd_stats(self, session: WordGraphSession) -> int:
        for key, value in session.get_statistics().items():
            print(f"{key}: {value}")
        return 0

    def cmd_rank(self, session: WordGraphSession, damping_input: Optional[str]) -> int:
        raw = self.config.damping_factor if damping_input is None else damping_input
        try:
            damping = validate_damping_factor(raw)
        except ValueError:
            print(DAMPING_ERROR)
            return 1

        ranks = session.ranks.ranked(damping)
        print("PageRank of all words:")
        for word, score in ranks:
            print(f"{word:<15} : {score:.6f}")
        return 0

    def cmd_walk(self, session: WordGraphSession, save: Optional[str]) -> int:
        nodes = session.random_walk()
        print(f"Random walk: {format_walk(nodes)}")
        if save is None:
            return 0

        target = save or self.config.walk_output_path
        result = save_walk(nodes, target)
        if result.is_failure:
            print(f"Warning: Could not save random walk: {result.error}", file=sys.stderr)
            return 1
        print(f"Random walk saved to {result.value}")
        return 0

    def run_interactive(self, session: WordGraphSession) -> int:
        """Numbered menu loop; ends on 7 or end of input."""
        while True:
            print(MENU)
            try:
                choice = self.input_func("> ").strip()
                if choice == "1":
                    print(session.show_directed_graph())
                    self._render(session)
                elif choice == "2":
                    word1 = self.input_func("Enter word1: ").strip().lower()
                    word2 = self.input_func("Enter word2: ").strip().lower()
                    print(session.query_bridge_words(word1, word2))
                elif choice == "3":
                    text = self.input_func("Enter new text: ")
                    print(session.generate_new_text(text))
                elif choice == "4":
                    word1 = self.input_func("Enter start word: ").strip().lower()
                    word2 = self.input_func("Enter end word: ").strip().lower()
                    print(session.calc_shortest_path(word1, word2))
                elif choice == "5":
                    damping = self.input_func("Enter damping factor (e.g. 0.85): ").strip()
                    self.cmd_rank(session, damping)
                elif choice == "6":
                    self.cmd_walk(session, save='')
                elif choice == "7":
                    print("Exiting.")
                    return 0
                else:
                    print("Invalid choice.")
            except EOFError:
                return 0

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run the CLI; returns the process exit status."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        try:
            session = self.load_session(parsed_args)
        except WordGraphError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        command = parsed_args.command
        if command == 'show':
            return self.cmd_show(session, parsed_args.render)
        if command == 'stats':
            return self.cmd_stats(session)
        if command == 'bridge':
            print(session.query_bridge_words(parsed_args.word1.lower(), parsed_args.word2.lower()))
            return 0
        if command == 'generate':
            text = " ".join(parsed_args.text)
            print(session.generate_new_text(text))
            return 0
        if command == 'path':
            print(session.calc_shortest_path(parsed_args.word1.lower(), parsed_args.word2.lower()))
            return 0
        if command == 'rank':
            return self.cmd_rank(session, parsed_args.damping)
        if command == 'walk':
            return self.cmd_walk(session, parsed_args.save)
        return self.run_interactive(session)


def create_cli(input_func: Callable[[str], str] = input) -> WordGraphCLI:
    """Create wordgraph CLI instance."""
    return WordGraphCLI(input_func)


def main() -> int:
    """Main entry point for CLI."""
    cli = create_cli()
    return cli.run()


if __name__ == '__main__':
    sys.exit(main())
