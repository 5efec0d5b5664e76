import pytest

from reversi_board.scene import Scene


class _Partial(Scene):
    def handle_event(self, event):
        pass


class _Complete(Scene):
    def handle_event(self, event):
        pass

    def update(self, delta):
        return None

    def draw(self, surface):
        pass


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_incomplete_subclass_cannot_be_created():
    with pytest.raises(TypeError):
        Scene.__new__(_Partial)


def test_complete_subclass_can_be_created():
    scene = Scene.__new__(_Complete)
    assert type(scene) is _Complete
    assert scene.update(0.5) is None