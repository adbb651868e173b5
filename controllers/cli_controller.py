import shlex

from config import DeckConfig

HELP = """Commands:
  templates                      list deck templates
  show                           show decks in this session
  add <template>                 add a deck from a template
  remove <deck>                  remove a deck
  shuffle <deck>                 shuffle a deck
  reshuffle <deck>               shuffle the discard pile back in
  draw <deck> [count]            draw cards onto the discard pile
  move <from> <to> [card]        move a random (or given) card to the top of another deck
  merge <deck> <other>           merge <other> into <deck>
  help | quit"""


class CLIController:
    def __init__(self, engine, session_key="local"):
        self.engine = engine
        self.session_key = session_key
        self.engine.start_session(session_key)

    # -----------------------------
    # DISPLAY HELPERS
    # -----------------------------

    def show_state(self):
        state = self.engine.get_state(self.session_key)
        lines = [f"===== SESSION {self.session_key} ({state.deck_count}/{DeckConfig.MAX_DECKS} decks) ====="]

        for deck in state.decks:
            lines.append(f"[{deck.id}] {deck.name}: {len(deck.cards)} cards, {len(deck.discard_pile)} discarded")
            if deck.cards:
                lines.append(f"    top: {deck.cards[-1].name} ({deck.cards[-1].id})")
            drawn = state.drawn_cards.get(deck.id)
            if drawn:
                lines.append("    last draw: " + ", ".join(c.name for c in drawn))

        return lines

    # -----------------------------
    # COMMANDS
    # -----------------------------

    def execute(self, line):
        """
        Run one command line and return the lines to print.
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return [f"Invalid input: {e}"]
        if not parts:
            return []

        command, args = parts[0].lower(), parts[1:]

        if command == "help":
            return HELP.splitlines()
        if command == "templates":
            return self.engine.list_templates() or ["No templates found."]
        if command == "show":
            return self.show_state()

        if command == "add" and len(args) == 1:
            result = self.engine.add_deck(self.session_key, args[0])
        elif command == "remove" and len(args) == 1:
            result = self.engine.remove_deck(self.session_key, args[0])
        elif command == "shuffle" and len(args) == 1:
            result = self.engine.shuffle(self.session_key, args[0])
        elif command == "reshuffle" and len(args) == 1:
            result = self.engine.shuffle_with_discard(self.session_key, args[0])
        elif command == "draw" and len(args) in (1, 2):
            count = DeckConfig.DEFAULT_DRAW_COUNT
            if len(args) == 2:
                if not args[1].isdigit():
                    return ["Count must be a whole number."]
                count = int(args[1])
            result = self.engine.draw(self.session_key, args[0], count)
        elif command == "move" and len(args) == 2:
            result = self.engine.move_random_card(self.session_key, args[0], args[1])
        elif command == "move" and len(args) == 3:
            result = self.engine.move_specific_card(self.session_key, args[0], args[1], args[2])
        elif command == "merge" and len(args) == 2:
            result = self.engine.merge_decks(self.session_key, args[0], args[1])
        else:
            return [f"Unknown command: {line.strip()}", "Type 'help' for commands."]

        if not result["ok"]:
            return [f"Nothing changed ({result['status'].replace('_', ' ')})."]
        return self.show_state()

    # -----------------------------
    # MAIN LOOP
    # -----------------------------

    def run(self):
        print("=== DECK SCRATCHPAD CLI ===")
        print("Type 'help' for commands.")

        while True:
            try:
                line = input("> ")
            except EOFError:
                break

            if line.strip().lower() in ("quit", "exit"):
                break

            for out in self.execute(line):
                print(out)
