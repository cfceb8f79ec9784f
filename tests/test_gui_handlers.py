import pytest

from visualization import gui


class FailingController:
    def randomize_maze(self):
        raise RuntimeError("randomize failed")

    def reset_maze(self):
        raise RuntimeError("reset failed")

    def solve_maze(self):
        raise RuntimeError("solve failed")


@pytest.fixture
def handlers(monkeypatch):
    errors = []
    monkeypatch.setattr(gui.messagebox, "showerror", lambda title, message: errors.append((title, message)))
    # Обробники не потребують віджетів, тому вікно Tk не створюється
    window = gui.MazeSolverGUI.__new__(gui.MazeSolverGUI)
    window.is_animating = False
    window.main_controller = FailingController()
    return window, errors


@pytest.mark.parametrize("handler,text", [
    ("_on_randomize", "randomize failed"),
    ("_on_clear_path", "reset failed"),
    ("_on_solve", "solve failed"),
])
def test_controller_errors_are_reported(handlers, handler, text, capsys):
    window, errors = handlers
    getattr(window, handler)()
    assert len(errors) == 1
    assert text in errors[0][1]
    assert "RuntimeError" in capsys.readouterr().err


def test_handlers_do_nothing_while_animating(handlers):
    window, errors = handlers
    window.is_animating = True
    window._on_randomize()
    window._on_clear_path()
    window._on_solve()
    assert errors == []
