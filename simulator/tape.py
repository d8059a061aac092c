from simulator.alphabet import Motion, Symbol, parse_input


class Tape:
    """
    Left-bounded, right-unbounded tape with a single read/write head.
    Cells to the right are created lazily as blanks when the head walks past the end.
    """

    def __init__(self, input_string=""):
        self.cells = parse_input(input_string)
        self.cells.append(Symbol.BLANK)
        self.head = 0

    def move(self, motion):
        """Move the head one cell. Returns False only for a left move at cell 0."""
        if motion == Motion.LEFT:
            if self.head == 0:
                return False
            self.head -= 1
        elif motion == Motion.RIGHT:
            self.head += 1
            if self.head == len(self.cells):
                self.cells.append(Symbol.BLANK)
        else:
            raise ValueError(f"Invalid direction: {motion!r}")
        return True

    def read(self):
        return self.cells[self.head]

    def write(self, symbol):
        self.cells[self.head] = symbol

    def reset(self):
        self.head = 0

    def head_index(self):
        return self.head

    def render_with_head(self):
        """Full tape contents with the head cell bracketed, e.g. [0]101B."""
        return "".join(
            f"[{symbol}]" if pos == self.head else str(symbol)
            for pos, symbol in enumerate(self.cells)
        )

    def visualize(self, window=10):
        """Two-line view of the cells around the head with a caret under it."""
        start = max(0, self.head - window)
        end = min(len(self.cells), self.head + window + 1)
        tape_str = ""
        head_str = ""
        for pos in range(start, end):
            tape_str += f"{self.cells[pos]} "
            head_str += "^ " if pos == self.head else "  "
        return tape_str.rstrip() + "\n" + head_str.rstrip()

    def __len__(self):
        return len(self.cells)

    def __str__(self):
        return self.render_with_head()
