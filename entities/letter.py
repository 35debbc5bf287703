"""
Letter items - the characters of the target word scattered through the maze
"""

from maze.maze_core import Position


class LetterItem:
    """
    One collectible character

    `collected` goes False -> True once, when the player steps on the cell.
    """
    def __init__(self, item_id, char, x, y):
        self.id = item_id
        self.char = char
        self.x = x
        self.y = y
        self.collected = False

    @property
    def position(self):
        return Position(self.x, self.y)

    def is_at_position(self, x, y):
        """Check if letter is at given position and not collected"""
        return self.x == x and self.y == y and not self.collected

    def collect(self):
        if self.collected:
            return False
        self.collected = True
        return True

    def __repr__(self):
        return f"LetterItem({self.id}, {self.char!r}, pos=({self.x},{self.y}), collected={self.collected})"


class LetterManager:
    """
    Manages the letters of the current level
    """
    def __init__(self):
        self.letters = []
        self.collected_chars = []  # In collection order

    def place_word(self, word, positions):
        """
        Create one letter per character, in word order

        Args:
            word: Target word
            positions: At least len(word) free positions

        Raises:
            ValueError: if there are not enough positions
        """
        if len(positions) < len(word):
            raise ValueError(f"need {len(word)} free cells for {word!r}, got {len(positions)}")

        self.clear()
        for index, (char, pos) in enumerate(zip(word, positions)):
            self.letters.append(LetterItem(f"l-{index}", char, pos[0], pos[1]))

    def get_letter_at(self, x, y):
        """Get uncollected letter at position (first in word order)"""
        for letter in self.letters:
            if letter.is_at_position(x, y):
                return letter
        return None

    def collect_letter(self, x, y):
        """
        Collect the letter at position

        Returns:
            LetterItem if one was collected, None otherwise
        """
        letter = self.get_letter_at(x, y)
        if letter and letter.collect():
            self.collected_chars.append(letter.char)
            return letter
        return None

    def uncollected_positions(self):
        return [letter.position for letter in self.letters if not letter.collected]

    def all_collected(self):
        return bool(self.letters) and all(letter.collected for letter in self.letters)

    def collected_count(self):
        return len(self.collected_chars)

    def word_progress(self, word):
        """
        Reveal collected characters of the word

        Each collected copy of a character uncovers one slot, left to right.

        Returns:
            List with the character for revealed slots and None otherwise
        """
        remaining = {}
        for char in self.collected_chars:
            remaining[char] = remaining.get(char, 0) + 1

        progress = []
        for char in word:
            if remaining.get(char, 0) > 0:
                remaining[char] -= 1
                progress.append(char)
            else:
                progress.append(None)
        return progress

    def clear(self):
        self.letters.clear()
        self.collected_chars.clear()

    def __repr__(self):
        return f"LetterManager(letters={len(self.letters)}, collected={self.collected_count()})"
