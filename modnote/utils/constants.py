APP_ORG = "ModernNotepad"
APP_NAME = "Modern Notepad"

TEXT_ENCODING = "utf-8"

FILE_FILTER = "Text Files (*.txt);;C# Files (*.cs);;All Files (*)"

STATUS_TEMPLATE = "Line: {line}, Column: {column}"

INITIAL_WIDTH = 1000
INITIAL_HEIGHT = 600
MIN_WIDTH = 400
MIN_HEIGHT = 300

TITLE_BAR_HEIGHT = 40
TITLE_BUTTON_SIZE = 40
STATUS_BAR_HEIGHT = 25
RESIZE_MARGIN = 6

GLYPH_MINIMIZE = "—"
GLYPH_MAXIMIZE = "□"
GLYPH_RESTORE = "❐"
GLYPH_CLOSE = "✕"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_FONT_SIZE = "editor/font_size"
