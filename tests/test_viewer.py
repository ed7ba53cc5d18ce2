from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from fractol.fractal import DEFAULT_ZOOM, ZOOM_FACTOR, Fractal
from fractol.viewer import Viewer, main


@pytest.fixture
def viewer():
    with patch("tkinter.PhotoImage") as photo, patch("tkinter.Label"):
        root = MagicMock()
        view = Viewer(Fractal(width=4, height=3), root)
        yield view, root, photo.return_value


def _rows(image):
    data = image.put.call_args.args[0]
    return [part.strip("{}").split() for part in data.split("} {")]


def test_window_is_set_up(viewer):
    view, root, _ = viewer
    root.title.assert_called_once_with("mandelbrot")
    bound = [c.args[0] for c in root.bind.call_args_list]
    assert "<Key>" in bound
    assert "<ButtonPress>" in bound


def test_redraw_puts_whole_image(viewer):
    view, _, image = viewer
    view.redraw()
    rows = _rows(image)
    assert len(rows) == 3
    assert all(len(row) == 4 for row in rows)
    assert all(c.startswith("#") and len(c) == 7 for row in rows for c in row)
    assert image.put.call_args.kwargs["to"] == (0, 0)


def test_redraw_matches_render(viewer):
    view, _, image = viewer
    view.redraw()
    rows = _rows(image)
    expected = view.fractal.render()
    assert rows == [[f"#{c:06x}" for c in row] for row in expected]


def test_escape_closes(viewer):
    view, root, _ = viewer
    view.on_key(SimpleNamespace(keysym="Escape"))
    root.destroy.assert_called_once_with()
    assert view.closed


def test_other_keys_do_nothing(viewer):
    view, root, _ = viewer
    view.on_key(SimpleNamespace(keysym="a"))
    root.destroy.assert_not_called()
    assert not view.closed


def test_close_only_once(viewer):
    view, root, _ = viewer
    view.close()
    view.close()
    assert root.destroy.call_count == 1


def test_scroll_up_zooms_in_and_redraws(viewer):
    view, _, image = viewer
    view.on_scroll(SimpleNamespace(num=4, delta=0))
    assert view.fractal.zoom == pytest.approx(DEFAULT_ZOOM * ZOOM_FACTOR)
    assert image.put.call_count == 1


def test_wheel_delta_zooms_out(viewer):
    view, _, image = viewer
    view.on_scroll(SimpleNamespace(num="??", delta=-120))
    assert view.fractal.zoom == pytest.approx(DEFAULT_ZOOM / ZOOM_FACTOR)
    assert image.put.call_count == 1


def test_click_redraws_without_zoom(viewer):
    view, _, image = viewer
    view.on_scroll(SimpleNamespace(num=1, delta=0))
    assert view.fractal.zoom == DEFAULT_ZOOM
    assert image.put.call_count == 1


def test_main_rejects_bad_arguments(capsys):
    assert main(["nope"]) == 1
    assert "Allowed arguments are" in capsys.readouterr().out


def test_main_reports_range_error(capsys):
    assert main(["julia", "3", "0"]) == 1
    assert capsys.readouterr().out == "Real part value must be between -2.0 and 2.0"