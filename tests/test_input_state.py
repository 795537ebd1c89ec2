"""
Tests for input_state.py -- keyboard and pointer input produce the same intents.
"""

import unittest

from moto_runner.data_models import InputIntent
from moto_runner.input_state import DUCK, JUMP, InputState

HEIGHT = 400


class TestKeyboard(unittest.TestCase):

    def setUp(self):
        self.inputs = InputState()

    def test_idle(self):
        self.assertEqual(self.inputs.consume(), InputIntent())

    def test_jump_is_one_shot(self):
        self.inputs.key_down(JUMP)
        self.assertTrue(self.inputs.consume().jump)
        self.assertFalse(self.inputs.consume().jump)

    def test_duck_is_held(self):
        self.inputs.key_down(DUCK)
        self.assertTrue(self.inputs.consume().duck)
        self.assertTrue(self.inputs.consume().duck)
        self.inputs.key_up(DUCK)
        self.assertFalse(self.inputs.consume().duck)

    def test_jump_requests_start(self):
        self.inputs.key_down(JUMP)
        self.assertTrue(self.inputs.consume_start())
        self.assertFalse(self.inputs.consume_start())


class TestPointer(unittest.TestCase):

    def setUp(self):
        self.inputs = InputState()

    def test_top_half_tap_jumps(self):
        self.inputs.pointer_down(50, HEIGHT)
        self.assertEqual(self.inputs.consume(), InputIntent(jump=True))

    def test_bottom_half_hold_ducks(self):
        self.inputs.pointer_down(350, HEIGHT)
        self.assertEqual(self.inputs.consume(), InputIntent(duck=True))
        self.assertTrue(self.inputs.consume().duck)
        self.inputs.pointer_up()
        self.assertFalse(self.inputs.consume().duck)

    def test_swipe_down_ducks(self):
        self.inputs.pointer_down(100, HEIGHT)
        self.inputs.consume()
        self.inputs.pointer_move(120)
        self.assertFalse(self.inputs.consume().duck)
        self.inputs.pointer_move(140)
        self.assertTrue(self.inputs.consume().duck)

    def test_move_without_press_ignored(self):
        self.inputs.pointer_move(300)
        self.assertFalse(self.inputs.consume().duck)

    def test_tap_requests_start(self):
        """Touch and keyboard both flag a start request the same way."""
        self.inputs.pointer_down(350, HEIGHT)
        self.assertTrue(self.inputs.consume_start())

    def test_keyboard_and_pointer_merge(self):
        self.inputs.key_down(DUCK)
        self.inputs.pointer_down(350, HEIGHT)
        self.inputs.pointer_up()
        self.assertTrue(self.inputs.consume().duck)

    def test_reset_clears_everything(self):
        self.inputs.key_down(JUMP)
        self.inputs.key_down(DUCK)
        self.inputs.pointer_down(350, HEIGHT)
        self.inputs.reset()
        self.assertEqual(self.inputs.consume(), InputIntent())
        self.assertFalse(self.inputs.consume_start())


if __name__ == "__main__":
    unittest.main()
