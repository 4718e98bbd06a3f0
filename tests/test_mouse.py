from grafengine.mouse import Mouse


def test_initial_state_is_unset():
    mouse = Mouse()
    assert mouse.is_unset() is True
    assert (mouse.current_x, mouse.previous_x) == (-1, -1)
    assert (mouse.current_y, mouse.previous_y) == (-1, -1)


def test_set_x_shifts_current_to_previous():
    mouse = Mouse()
    mouse.set_x(10.0)
    mouse.set_x(25.0)
    assert mouse.current_x == 25.0
    assert mouse.previous_x == 10.0


def test_set_y_shifts_current_to_previous():
    mouse = Mouse()
    mouse.set_y(3.5)
    assert mouse.previous_y == -1
    mouse.set_y(7.0)
    assert (mouse.current_y, mouse.previous_y) == (7.0, 3.5)


def test_axes_are_independent():
    mouse = Mouse()
    mouse.set_x(4.0)
    assert mouse.current_y == -1
    assert mouse.is_unset() is False