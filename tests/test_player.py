from blockmaze.player import IMAGE_FILE, SPRITE_SIZE, Player


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_rect_graph(self, x, y, src_x, src_y, width, height, image):
        self.calls.append((x, y, src_x, src_y, width, height, image))


def test_draw_first_frame_at_origin():
    canvas = RecordingCanvas()
    Player().draw(canvas)
    assert canvas.calls == [(0, 0, 0, 0, SPRITE_SIZE, SPRITE_SIZE, IMAGE_FILE)]


def test_update_changes_nothing_drawn():
    player = Player()
    before = RecordingCanvas()
    player.draw(before)
    player.update()
    after = RecordingCanvas()
    player.draw(after)
    assert before.calls == after.calls


def test_custom_image_is_used():
    marker = object()
    canvas = RecordingCanvas()
    Player(image=marker).draw(canvas)
    assert canvas.calls[0][6] is marker