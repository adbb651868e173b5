from game.engine import DeckEngine
from game.loader import DeckLoader
from game.store import SessionStore
from controllers.cli_controller import CLIController
from utils import configure_logging

configure_logging("WARNING")

engine = DeckEngine(SessionStore(use_redis=False), DeckLoader())

cli = CLIController(engine)
cli.run()
