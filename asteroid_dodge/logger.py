"""Markdown logger for gameplay events (hits, game over, restarts, resizes)."""

import datetime

class GameLogger:
    """Handles logging of game events to markdown file."""
    
    def __init__(self, log_file: str):
        """
        Initialize the game logger.
        
        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()
    
    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Asteroid Dodge Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Details |\n")
                f.write("|-----------|-------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {details} |\n")
        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_hit(self, pos: tuple[float, float]) -> None:
        """
        Log the asteroid contact that ended a run.
        
        Parameters
        ----------
        pos : Tuple[float, float]
            Player position (field coordinates) at the moment of impact
        """
        self._write_row("HIT", f"Player struck at ({pos[0]:.0f}, {pos[1]:.0f})")

    def log_game_over(self, score: int) -> None:
        """
        Log the end of a run.
        
        Parameters
        ----------
        score : int
            Final score (whole seconds survived)
        """
        self._write_row("GAME OVER", f"Final score {score}")

    def log_restart(self) -> None:
        self._write_row("RESTART", "New game started")

    def log_resize(self, width: float, height: float) -> None:
        self._write_row("RESIZE", f"Field resized to {width:.0f}x{height:.0f}")
