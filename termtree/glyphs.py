import dataclasses
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class GlyphPalette:
    """
    The glyphs used to draw a node.

    `middle_item`/`last_item` followed by `item_indent` start the first line of a node.
    `middle_skip`/`last_skip` followed by `skip_indent` fill ancestor columns and the
    continuation lines of multiline nodes.
    """
    middle_item: str = '├'
    last_item: str = '└'
    item_indent: str = '── '

    middle_skip: str = '|'
    last_skip: str = ' '
    skip_indent: str = '   '

    def item(self, last: bool) -> Tuple[str, str]:
        return (self.last_item if last else self.middle_item), self.item_indent

    def skip(self, last: bool) -> Tuple[str, str]:
        return (self.last_skip if last else self.middle_skip), self.skip_indent

    def misaligned(self, last: Optional[bool] = None) -> List[Tuple[str, str]]:
        """
        Pairs of (item glyph, skip glyph) whose widths differ.

        :param last: Only check the glyphs drawn for a last (True) or a middle (False) child.
        """
        if last is None:
            pairs = [
                (self.middle_item, self.middle_skip),
                (self.last_item, self.last_skip),
                (self.item_indent, self.skip_indent),
            ]
        else:
            pairs = list(zip(self.item(last), self.skip(last)))
        return [(item, skip) for item, skip in pairs if len(item) != len(skip)]

    def is_aligned(self) -> bool:
        """ Continuation lines of multiline nodes line up with the first line. """
        return not self.misaligned()

    def replace(self, **changes) -> "GlyphPalette":
        return dataclasses.replace(self, **changes)


DEFAULT = GlyphPalette()
ASCII = GlyphPalette(middle_item='|', last_item='`', item_indent='-- ')
CONT = GlyphPalette(middle_skip='│')
CONT_ROUND = GlyphPalette(last_item='╰', middle_skip='│')
DOUBLE = GlyphPalette(
    middle_item='╠', last_item='╚', item_indent='══ ',
    middle_skip='║',
)
