"""
Command script editor widget with syntax highlighting and dark mode.
"""
from PySide6.QtWidgets import QPlainTextEdit, QWidget, QTextEdit
from PySide6.QtGui import (QColor, QTextFormat, QPainter, QFont, QSyntaxHighlighter,
                          QTextCharFormat, QPalette)
from PySide6.QtCore import Qt, QRect, QSize
import re


class CommandHighlighter(QSyntaxHighlighter):
    """Robot command highlighter with dark mode colors."""

    PLACE_PATTERN = re.compile(r'^\s*(PLACE)\b(.*)$', re.IGNORECASE)
    VERB_PATTERN = re.compile(r'^\s*(MOVE|LEFT|RIGHT|REPORT)\s*$', re.IGNORECASE)
    NUMBER_PATTERN = re.compile(r'[+-]?\d+')
    DIRECTION_PATTERN = re.compile(r'\b(NORTH|EAST|SOUTH|WEST)\b', re.IGNORECASE)

    def __init__(self, document):
        super().__init__(document)

        font = QFont('Consolas', 11)
        font.setFixedPitch(True)

        self.place_format = QTextCharFormat()
        self.place_format.setForeground(QColor('#ff6b6b'))  # Red for PLACE
        self.place_format.setFont(font)
        self.place_format.setFontWeight(QFont.Weight.Bold)

        self.verb_format = QTextCharFormat()
        self.verb_format.setForeground(QColor('#51cf66'))  # Green for other verbs
        self.verb_format.setFont(font)
        self.verb_format.setFontWeight(QFont.Weight.Bold)

        self.number_format = QTextCharFormat()
        self.number_format.setForeground(QColor('#74c0fc'))
        self.number_format.setFont(font)

        self.direction_format = QTextCharFormat()
        self.direction_format.setForeground(QColor('#ffd43b'))
        self.direction_format.setFont(font)

        self.comment_format = QTextCharFormat()
        self.comment_format.setForeground(QColor('#6c757d'))  # Gray for comments
        self.comment_format.setFont(font)
        self.comment_format.setFontItalic(True)

    def highlightBlock(self, text):
        """Apply syntax highlighting to one script line."""
        if text.lstrip().startswith('#'):
            self.setFormat(0, len(text), self.comment_format)
            return

        verb_match = self.VERB_PATTERN.match(text)
        if verb_match:
            self.setFormat(verb_match.start(1), len(verb_match.group(1)), self.verb_format)
            return

        place_match = self.PLACE_PATTERN.match(text)
        if not place_match:
            return

        self.setFormat(place_match.start(1), len(place_match.group(1)), self.place_format)
        offset = place_match.start(2)
        arguments = place_match.group(2)
        for match in self.NUMBER_PATTERN.finditer(arguments):
            self.setFormat(offset + match.start(), len(match.group(0)), self.number_format)
        for match in self.DIRECTION_PATTERN.finditer(arguments):
            self.setFormat(offset + match.start(), len(match.group(0)), self.direction_format)


class LineNumberArea(QWidget):
    """Line number area widget for the editor."""

    def __init__(self, editor):
        super().__init__(editor)
        self.editor = editor

    def sizeHint(self):
        return QSize(self.editor.lineNumberAreaWidth(), 0)

    def paintEvent(self, event):
        self.editor.lineNumberAreaPaintEvent(event)


class Editor(QPlainTextEdit):
    """Command script editor with line numbers and diagnostic highlighting."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.setup_dark_mode()

        self.lineNumberArea = LineNumberArea(self)

        # Lines with error diagnostics, and lines with only warnings
        self.error_lines = set()
        self.warning_lines = set()

        self.setup_editor()

        self.highlighter = CommandHighlighter(self.document())

        self.blockCountChanged.connect(self.updateLineNumberAreaWidth)
        self.updateRequest.connect(self.updateLineNumberArea)
        self.cursorPositionChanged.connect(self.update_extra_selections)

    def setup_dark_mode(self):
        """Configure dark mode appearance."""
        palette = self.palette()
        palette.setColor(QPalette.Base, QColor('#2b2b2b'))  # Background
        palette.setColor(QPalette.Text, QColor('#f8f8f2'))  # Text
        palette.setColor(QPalette.Highlight, QColor('#44475a'))  # Selection
        palette.setColor(QPalette.HighlightedText, QColor('#f8f8f2'))
        self.setPalette(palette)

    def setup_editor(self):
        """Configure the editor appearance and behavior."""
        self.setLineWrapMode(QPlainTextEdit.NoWrap)

        font = QFont("Consolas", 11)
        if not font.exactMatch():
            font = QFont("Courier New", 11)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setFixedPitch(True)
        self.setFont(font)

        self.updateLineNumberAreaWidth(0)

    def highlight_diagnostics(self, error_lines, warning_lines):
        """Mark lines with errors (red) and warnings (amber)."""
        self.error_lines = set(error_lines or [])
        self.warning_lines = set(warning_lines or []) - self.error_lines
        self.update_extra_selections()

    def clear_diagnostics(self):
        self.error_lines.clear()
        self.warning_lines.clear()
        self.update_extra_selections()

    def _line_selection(self, line_num, color):
        block = self.document().findBlockByNumber(line_num - 1)
        if not block.isValid():
            return None
        selection = QTextEdit.ExtraSelection()
        selection.format.setBackground(QColor(color))
        selection.format.setProperty(QTextFormat.FullWidthSelection, True)
        selection.cursor = self.textCursor()
        selection.cursor.setPosition(block.position())
        selection.cursor.clearSelection()
        return selection

    def update_extra_selections(self):
        """Update all line highlighting (current line, errors, warnings)."""
        selections = []

        if not self.isReadOnly():
            cursor = self.textCursor()
            if not cursor.hasSelection():
                selection = QTextEdit.ExtraSelection()
                selection.format.setBackground(QColor('#44475a'))
                selection.format.setProperty(QTextFormat.FullWidthSelection, True)
                selection.cursor = cursor
                selection.cursor.clearSelection()
                selections.append(selection)

        for line_num, color in ([(n, '#660000') for n in self.error_lines] +
                                [(n, '#5c4400') for n in self.warning_lines]):
            if line_num > 0:
                selection = self._line_selection(line_num, color)
                if selection is not None:
                    selections.append(selection)

        self.setExtraSelections(selections)

    # Line number area methods
    def lineNumberAreaWidth(self):
        """Calculate the width needed for line numbers."""
        digits = len(str(max(1, self.blockCount())))
        return 3 + self.fontMetrics().horizontalAdvance('9') * digits

    def updateLineNumberAreaWidth(self, _):
        self.setViewportMargins(self.lineNumberAreaWidth(), 0, 0, 0)

    def updateLineNumberArea(self, rect, dy):
        """Update the line number area when scrolling."""
        if dy:
            self.lineNumberArea.scroll(0, dy)
        else:
            self.lineNumberArea.update(0, rect.y(), self.lineNumberArea.width(), rect.height())

        if rect.contains(self.viewport().rect()):
            self.updateLineNumberAreaWidth(0)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        cr = self.contentsRect()
        self.lineNumberArea.setGeometry(QRect(cr.left(), cr.top(), self.lineNumberAreaWidth(), cr.height()))

    def lineNumberAreaPaintEvent(self, event):
        """Paint the line number area."""
        painter = QPainter(self.lineNumberArea)
        painter.fillRect(event.rect(), QColor('#383838'))

        block = self.firstVisibleBlock()
        blockNumber = block.blockNumber()
        top = self.blockBoundingGeometry(block).translated(self.contentOffset()).top()
        bottom = top + self.blockBoundingRect(block).height()

        while block.isValid() and top <= event.rect().bottom():
            if block.isVisible() and bottom >= event.rect().top():
                if (blockNumber + 1) in self.error_lines:
                    painter.setPen(QColor('#ff6b6b'))
                elif (blockNumber + 1) in self.warning_lines:
                    painter.setPen(QColor('#ffd43b'))
                else:
                    painter.setPen(QColor('#6c757d'))

                painter.drawText(0, int(top), self.lineNumberArea.width() - 3,
                                 self.fontMetrics().height(), Qt.AlignRight, str(blockNumber + 1))

            block = block.next()
            top = bottom
            bottom = top + self.blockBoundingRect(block).height()
            blockNumber += 1
