import pytest

from dwarfgame.animation import AnimDirectional


class FakeSheet:
    def __init__(self, size=(10, 20), num_animations=2, direction=0):
        self.sprite_size = size
        self.num_animations = num_animations
        self.direction = direction
        self.rects = []

    def crop_sprite(self, rect):
        self.rects.append(rect)


def make_anim(text, loop=False):
    anim = AnimDirectional(sprite_sheet=FakeSheet())
    anim.read_in(text)
    anim.loop = loop
    anim.reset()
    return anim


def test_defaults_are_always_in_action():
    anim = AnimDirectional()
    assert anim.frame_time == 1.0
    assert anim.frame_action_start == -1
    assert anim.is_in_action() is True
    assert anim.playing is False


def test_read_in_parses_all_fields():
    anim = AnimDirectional()
    anim.read_in("0 7 2 0.1 4 6")
    assert (anim.start_frame, anim.end_frame, anim.frame_row) == (0, 7, 2)
    assert anim.frame_time == pytest.approx(0.1)
    assert (anim.frame_action_start, anim.frame_action_end) == (4, 6)


def test_read_in_rejects_bad_number():
    with pytest.raises(ValueError):
        AnimDirectional().read_in("0 seven 2 0.1 4 6")


def test_set_frame_only_within_range():
    anim = make_anim("2 5 0 0.1 -1 -1")
    anim.set_frame(4)
    assert anim.cur_frame == 4
    anim.set_frame(9)
    assert anim.cur_frame == 4


def test_update_does_nothing_when_not_playing():
    anim = make_anim("0 3 0 0.1 -1 -1")
    anim.update(5.0)
    assert anim.cur_frame == anim.start_frame


def test_update_accumulates_time_before_stepping():
    anim = make_anim("0 3 0 1.0 -1 -1")
    anim.play()
    anim.update(0.5)
    assert anim.cur_frame == anim.start_frame
    anim.update(0.5)
    assert anim.cur_frame == anim.start_frame + 1
    assert anim.elapsed_time == 0.0


def test_non_looping_animation_stops_at_end():
    anim = make_anim("0 2 0 0.1 -1 -1")
    anim.play()
    for _ in range(5):
        anim.update(0.1)
    assert anim.cur_frame == anim.end_frame
    assert anim.playing is False


def test_looping_animation_wraps_to_start():
    anim = make_anim("0 1 0 0.1 -1 -1", loop=True)
    anim.play()
    anim.update(0.1)
    assert anim.cur_frame == anim.end_frame
    anim.update(0.1)
    assert anim.cur_frame == anim.start_frame
    assert anim.playing is True


def test_backwards_animation_counts_down():
    anim = make_anim("3 0 0 0.1 -1 -1")
    anim.play()
    anim.update(0.1)
    assert anim.cur_frame == anim.start_frame - 1


def test_action_window():
    anim = make_anim("0 7 0 0.1 4 6")
    assert anim.is_in_action() is False
    anim.set_frame(5)
    assert anim.is_in_action() is True
    anim.set_frame(7)
    assert anim.is_in_action() is False


def test_stop_resets_to_start():
    anim = make_anim("0 7 0 0.1 -1 -1")
    anim.play()
    anim.set_frame(6)
    anim.stop()
    assert anim.cur_frame == anim.start_frame
    assert anim.playing is False


def test_crop_uses_row_and_direction_block():
    sheet = FakeSheet(size=(10, 20), num_animations=2, direction=1)
    anim = AnimDirectional(sprite_sheet=sheet, frame_row=1, start_frame=0, end_frame=3)
    anim.set_frame(2)
    anim.crop_sprite()
    assert sheet.rects[-1] == (20, 60, 10, 20)


def test_reset_crops_the_sprite():
    anim = make_anim("0 3 0 0.1 -1 -1")
    assert anim.sprite_sheet.rects[-1] == (0, 0, 10, 20)