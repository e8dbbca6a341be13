from mazecore.constants import NORTH
from mazecore.game import GameSession
from mazecore.models import Settings


def make_session(first_choice, **kw) -> GameSession:
    return GameSession(Settings(width=3, height=3, **kw), rng=first_choice)


def test_controls_disabled_until_start(first_choice) -> None:
    session = make_session(first_choice)
    assert not session.controls_enabled
    assert session.move_observer(4.0, 0.0) is False
    assert session.observer.x == 0.0


def test_start_generates_and_places_observer(first_choice) -> None:
    session = make_session(first_choice)
    session.start()

    assert session.maze.generation == 1
    assert session.controls_enabled
    assert (session.observer.x, session.observer.y, session.observer.z) == (0.0, 1.0, 0.0)
    assert session.guide.path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert len(session.guide.arrows) == 4


def test_exit_opening_follows_settings(first_choice) -> None:
    session = make_session(first_choice)
    session.start()
    assert not session.maze.has_wall(2, 2, NORTH)

    closed = make_session(first_choice, exit_opening=False)
    closed.start()
    assert closed.maze.has_wall(2, 2, NORTH)


def test_walking_to_the_exit(first_choice) -> None:
    session = make_session(first_choice)
    session.start()

    assert session.move_observer(0.0, 4.0)
    assert not session.reached_exit
    assert session.guide.path[0] == (0, 1)

    x, _, z = session.exit_position()
    assert (x, z) == (8.0, 8.0)
    session.move_observer(x, z)
    assert session.reached_exit
    assert session.guide.arrows == []


def test_restart_gives_fresh_round(first_choice) -> None:
    session = make_session(first_choice)
    session.start()
    session.move_observer(8.0, 8.0)

    session.start()

    assert session.maze.generation == 2
    assert session.observer_cell == (0, 0)
    assert not session.reached_exit


def test_seeded_sessions_share_layout() -> None:
    a = GameSession(Settings(width=8, height=6, seed=42))
    b = GameSession(Settings(width=8, height=6, seed=42))
    a.start()
    b.start()
    assert a.maze.wall_layout() == b.maze.wall_layout()


def test_ignore_walls_setting(first_choice) -> None:
    session = make_session(first_choice, respect_walls=False)
    session.start()
    session.guide.set_target((1, 1))
    assert session.guide.path == [(0, 0), (0, 1), (1, 1)]


def test_quit(first_choice) -> None:
    session = make_session(first_choice)
    session.start()
    session.quit()

    assert session.finished
    assert not session.controls_enabled
    assert session.guide.arrows == []
    assert session.move_observer(8.0, 8.0) is False


def test_reaching_exit_ends_the_round(first_choice) -> None:
    session = make_session(first_choice)
    session.start()
    assert not session.won

    session.move_observer(8.0, 8.0)

    assert session.won
    assert session.reached_exit
    assert not session.controls_enabled
    assert session.move_observer(0.0, 0.0) is False
    assert session.observer_cell == (2, 2)
