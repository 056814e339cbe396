"""
Encore CLI Module
Command-line access to the artwork resolver.
"""

import argparse
from typing import Dict, List, Union

from ..core.config import PROJECT_NAME, PROJECT_VERSION
from ..core.exceptions import EncoreError
from ..core.logger import setup_logging
from ..services.artwork_resolver import ArtworkResolver
from .display import DisplayManager


class EncoreCLI:
    """Main CLI class for Encore."""
    
    def __init__(self, resolver: ArtworkResolver = None, display_manager: DisplayManager = None):
        """Initialize the CLI."""
        self.resolver = resolver or ArtworkResolver()
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} - SoundCloud artwork resolver v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s artwork https://soundcloud.com/artist/track
  %(prog)s artwork https://soundcloud.com/artist/one https://soundcloud.com/artist/two --json
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help='Override the configured log level'
        )
        
        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )
        
        artwork_parser = subparsers.add_parser(
            'artwork',
            help='Resolve high resolution artwork for SoundCloud tracks'
        )
        artwork_parser.add_argument(
            'urls',
            nargs='+',
            help='SoundCloud track URLs'
        )
        artwork_parser.add_argument(
            '--json',
            action='store_true',
            help='Print results as JSON'
        )
        
        return parser
    
    def resolve_all(self, urls: List[str]) -> Dict[str, Union[str, Exception]]:
        """Resolve every URL concurrently, keeping failures alongside successes."""
        futures = {url: self.resolver.submit(url) for url in urls}
        results = {}
        for url, future in futures.items():
            try:
                results[url] = future.result()
            except EncoreError as e:
                results[url] = e
        return results
    
    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments. Returns the process exit code."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        
        if parsed_args.log_level:
            setup_logging(level=parsed_args.log_level)
        
        try:
            if parsed_args.mode == 'artwork':
                results = self.resolve_all(parsed_args.urls)
                if parsed_args.json:
                    self.display_manager.display_artwork_json(results)
                else:
                    self.display_manager.display_artwork_results(results)
                return 1 if any(isinstance(r, Exception) for r in results.values()) else 0
        finally:
            self.resolver.close()
        
        return 0
