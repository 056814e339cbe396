"""
Display management for the Encore CLI with Rich components.
"""

import json
from typing import Dict, Union
from rich.console import Console
from rich.table import Table
from rich import box


class DisplayManager:
    """Renders artwork resolution results."""
    
    def __init__(self, console: Console = None):
        self.console = console or Console()
    
    def display_artwork_results(self, results: Dict[str, Union[str, Exception]]):
        """Display resolved artwork URLs and failures in a table."""
        table = Table(title="SoundCloud Artwork", box=box.ROUNDED, show_lines=False)
        table.add_column("Track", style="cyan", overflow="fold")
        table.add_column("Artwork", overflow="fold")
        
        for media_url, outcome in results.items():
            if isinstance(outcome, Exception):
                table.add_row(media_url, f"[yellow]⚠[/yellow] [dim]{outcome}[/dim]")
            else:
                table.add_row(media_url, f"[green]{outcome}[/green]")
        
        self.console.print(table)
    
    def display_artwork_json(self, results: Dict[str, Union[str, Exception]]):
        """Print results as JSON: artwork URL or null per track."""
        payload = {
            media_url: None if isinstance(outcome, Exception) else outcome
            for media_url, outcome in results.items()
        }
        self.console.print_json(json.dumps(payload))
