from maxutility.cli.app import app

__all__ = ["app"]
