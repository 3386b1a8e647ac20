from craftus.controller import Buttons, InputData
from craftus.gui import BUTTON_HEIGHT, Gui
from craftus.spritebatch import SpriteBatch


def _gui():
    batch = SpriteBatch([8] * 256)
    batch.start_frame(400, 240)
    return Gui(batch), batch


def test_relative_sizes():
    gui, _ = _gui()
    assert gui.relative_width(0.5) == 100
    assert gui.relative_height(1.0) == 120


def test_cursor_inside_uses_scaled_touch():
    gui, _ = _gui()
    gui.input_data(InputData(touch_x=20, touch_y=20))
    assert gui.is_cursor_inside(0, 0, 20, 20)
    assert not gui.is_cursor_inside(11, 0, 20, 20)
    assert gui.entered_cursor_inside(0, 0, 20, 20)


def test_no_touch_is_never_inside():
    gui, _ = _gui()
    gui.input_data(InputData())
    assert not gui.is_cursor_inside(-10, -10, 100, 100)


def test_was_cursor_inside_tracks_previous_frame():
    gui, _ = _gui()
    gui.input_data(InputData(touch_x=20, touch_y=20))
    gui.input_data(InputData(touch_x=200, touch_y=200))
    assert gui.was_cursor_inside(0, 0, 20, 20)
    assert not gui.entered_cursor_inside(90, 90, 20, 20)


def test_cursor_movement():
    gui, _ = _gui()
    gui.input_data(InputData(touch_x=20, touch_y=20))
    gui.input_data(InputData(touch_x=40, touch_y=60))
    assert gui.cursor_movement() == (10, 20)
    gui.input_data(InputData())
    assert gui.cursor_movement() == (0, 0)


def test_button_clicked_on_release_inside():
    gui, _ = _gui()
    gui.input_data(InputData(touch_x=20, touch_y=20))
    gui.input_data(InputData(keys_up=Buttons.TOUCH))
    gui.frame()
    gui.begin_row(100, 1)
    assert gui.button(1.0, "Play")


def test_button_not_clicked_without_release():
    gui, _ = _gui()
    gui.input_data(InputData(touch_x=20, touch_y=20))
    gui.input_data(InputData(touch_x=20, touch_y=20))
    gui.frame()
    gui.begin_row(100, 1)
    assert not gui.button(1.0, "Play")


def test_button_pushes_slices_and_text():
    gui, batch = _gui()
    gui.frame()
    gui.begin_row(100, 1)
    gui.button(0.0, "OK")
    assert len(batch.commands) == 3 + 2 * 2
    gui.end_row()
    assert gui.window_y == BUTTON_HEIGHT + gui.padding_y


def test_label_advances_by_text_width():
    gui, batch = _gui()
    gui.frame()
    gui.begin_row(200, 1)
    start = gui.relative_x
    gui.label(0.0, False, 0, False, "abc")
    assert gui.relative_x == start + batch.calc_text_width("abc") + gui.padding_x


def test_begin_row_center_centres_window():
    gui, batch = _gui()
    gui.begin_row_center(100, 1)
    assert gui.window_x * 2 + 100 == batch.width