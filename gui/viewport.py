"""
OpenGL viewport for rendering the grid, the robot's trail and the robot itself.
"""
from PySide6.QtOpenGLWidgets import QOpenGLWidget
from OpenGL.GL import *
from core.robot_state import GRID_SIZE


# Arrow vertices for a robot facing North, in cell units around the cell centre
ARROW_NORTH = [(0.0, 0.35), (-0.25, -0.3), (0.25, -0.3)]

# Clockwise quarter turns per facing label
FACING_TURNS = {'North': 0, 'East': 1, 'South': 2, 'West': 3}


def rotate_quarter_turns(point, turns):
    """Rotate a 2D point clockwise by 90 degree steps."""
    x, y = point
    for _ in range(turns % 4):
        x, y = y, -x
    return x, y


class Viewport(QOpenGLWidget):
    """Top-down viewport of the 6x6 grid."""

    def __init__(self, parent=None, cell_size=80):
        super().__init__(parent)

        self.cell_size = cell_size
        self.setMinimumSize(cell_size * GRID_SIZE, cell_size * GRID_SIZE)

        # State pushed by the main window
        self.robot_cell = None
        self.robot_facing = None
        self.trail = []

        # Display settings
        self.show_grid = True
        self.show_trail = True

    def set_robot(self, state_summary, trail):
        """Update with a robot state summary and trail from the processor."""
        if state_summary.get('placed'):
            self.robot_cell = tuple(state_summary['position'])
            self.robot_facing = state_summary['facing']
        else:
            self.robot_cell = None
            self.robot_facing = None
        self.trail = list(trail or [])
        self.update()

    def initializeGL(self):
        """Setup OpenGL context."""
        glClearColor(0.1, 0.1, 0.15, 1.0)
        glEnable(GL_LINE_SMOOTH)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def resizeGL(self, w, h):
        """Keep the whole grid visible with square cells."""
        glViewport(0, 0, w, h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()

        aspect = w / h if h > 0 else 1.0
        margin = 0.25
        if aspect >= 1.0:
            half_extra = (GRID_SIZE * aspect - GRID_SIZE) / 2
            glOrtho(-margin - half_extra, GRID_SIZE + margin + half_extra,
                    -margin, GRID_SIZE + margin, -1, 1)
        else:
            half_extra = (GRID_SIZE / aspect - GRID_SIZE) / 2
            glOrtho(-margin, GRID_SIZE + margin,
                    -margin - half_extra, GRID_SIZE + margin + half_extra, -1, 1)

    def paintGL(self):
        """Main render loop."""
        glClear(GL_COLOR_BUFFER_BIT)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        if self.show_grid:
            self.draw_grid()
        if self.show_trail:
            self.draw_trail()
        self.draw_robot()

    def draw_grid(self):
        """Draw cell boundaries, with the origin cell shaded."""
        glColor3f(0.18, 0.18, 0.24)
        glBegin(GL_QUADS)
        glVertex2f(0, 0)
        glVertex2f(1, 0)
        glVertex2f(1, 1)
        glVertex2f(0, 1)
        glEnd()

        glLineWidth(1.0)
        glColor3f(0.4, 0.4, 0.4)
        glBegin(GL_LINES)
        for i in range(GRID_SIZE + 1):
            glVertex2f(i, 0)
            glVertex2f(i, GRID_SIZE)
            glVertex2f(0, i)
            glVertex2f(GRID_SIZE, i)
        glEnd()

    def draw_trail(self):
        """Draw the path through visited cell centres."""
        if len(self.trail) < 2:
            return

        glLineWidth(2.0)
        glColor3f(0.2, 0.5, 1.0)
        glLineStipple(1, 0xAAAA)
        glEnable(GL_LINE_STIPPLE)

        glBegin(GL_LINE_STRIP)
        for x, y in self.trail:
            glVertex2f(x + 0.5, y + 0.5)
        glEnd()

        glDisable(GL_LINE_STIPPLE)

    def draw_robot(self):
        """Draw the robot as an arrow pointing along its facing."""
        if self.robot_cell is None:
            return

        cx = self.robot_cell[0] + 0.5
        cy = self.robot_cell[1] + 0.5
        turns = FACING_TURNS.get(self.robot_facing, 0)

        glColor3f(1.0, 0.5, 0.2)
        glBegin(GL_TRIANGLES)
        for point in ARROW_NORTH:
            x, y = rotate_quarter_turns(point, turns)
            glVertex2f(cx + x, cy + y)
        glEnd()

    def toggle_display_option(self, option):
        """Toggle display options."""
        if option == 'grid':
            self.show_grid = not self.show_grid
        elif option == 'trail':
            self.show_trail = not self.show_trail

        self.update()
