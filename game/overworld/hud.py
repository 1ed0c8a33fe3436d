"""Status line and dialogue box drawn over the map."""

from __future__ import annotations

from typing import List, Optional

import pygame as pg


class DialoguePanel:
    """Dialogue view backed by pygame fonts.

    The controller pushes name/line/status updates; ``draw`` paints whatever
    was last pushed.
    """

    def __init__(self, font: Optional[pg.font.Font] = None, name_font: Optional[pg.font.Font] = None) -> None:
        self.font = font
        self.name_font = name_font
        self.visible = False
        self.name = ""
        self.text = ""
        self.status = ""

    # ------------------------------------------------------------ view updates
    def show(self, name: str, text: str) -> None:
        self.visible = True
        self.name = name
        self.text = text

    def hide(self) -> None:
        self.visible = False
        self.name = ""
        self.text = ""

    def set_status(self, text: str) -> None:
        self.status = text

    # ------------------------------------------------------------------ drawing
    def draw(self, screen: pg.Surface) -> None:
        if self.font is None:
            self.font = pg.font.SysFont("arial", 18)
        if self.name_font is None:
            self.name_font = pg.font.SysFont("georgia", 20, bold=True)

        if self.status:
            self._draw_status(screen, self.status)
        if self.visible:
            self._draw_dialogue_box(screen)

    def _draw_status(self, screen: pg.Surface, text: str) -> None:
        status = self.font.render(text, True, (220, 225, 240))
        rect = status.get_rect()
        backdrop = pg.Surface((rect.width + 16, rect.height + 12), pg.SRCALPHA)
        backdrop.fill((10, 12, 18, 200))
        backdrop.blit(status, (8, 6))
        pg.draw.rect(backdrop, (90, 110, 160, 220), backdrop.get_rect(), width=1, border_radius=8)
        screen.blit(backdrop, (12, 12))

    def _draw_dialogue_box(self, screen: pg.Surface) -> None:
        # Narrow windows trade the side margin for text room; width stays >= 1.
        margin = 40 if screen.get_width() >= 240 else 4
        box_width = max(1, screen.get_width() - margin * 2)
        lines = self.wrap_text(self.text, max(1, box_width - 24), self.font)
        line_height = self.font.get_linesize()
        name_height = self.name_font.get_linesize()
        box_height = name_height + line_height * len(lines) + 26
        box_rect = pg.Rect(margin, screen.get_height() - box_height - 24, box_width, box_height)

        overlay = pg.Surface(box_rect.size, pg.SRCALPHA)
        overlay.fill((10, 12, 24, 220))
        pg.draw.rect(overlay, (120, 150, 255, 220), overlay.get_rect(), width=2, border_radius=12)
        screen.blit(overlay, box_rect)

        y = box_rect.top + 10
        name = self.name_font.render(self.name, True, (255, 230, 160))
        screen.blit(name, (box_rect.left + 12, y))
        y += name_height + 6
        for line in lines:
            rendered = self.font.render(line, True, (230, 232, 250))
            screen.blit(rendered, (box_rect.left + 12, y))
            y += line_height

    @staticmethod
    def wrap_text(text: str, max_width: int, font: pg.font.Font) -> List[str]:
        """Greedy word wrap; words wider than a line are cut by character."""

        lines: List[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}" if current else word
            if font.size(candidate)[0] <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = ""
            for char in word:
                if current and font.size(current + char)[0] > max_width:
                    lines.append(current)
                    current = char
                else:
                    current += char
        if current:
            lines.append(current)
        return lines
