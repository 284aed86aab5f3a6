from page_styles.cli.main import cli

__all__ = ["cli"]
