from __future__ import annotations

import unittest

from plotscript import Figure, Horizontal, Justification, KeyProperties, Order, Position, Stacked, Vertical


class KeyPropertiesTests(unittest.TestCase):
    def test_default_key_renders_bare_on_directive(self) -> None:
        self.assertEqual(KeyProperties().script(), "set key on \n")

    def test_hidden_key_ignores_every_other_field(self) -> None:
        key = KeyProperties()
        key.position(Position.outside(Vertical.BOTTOM, Horizontal.LEFT)).title("prices").boxed(True)
        key.stacked(Stacked.HORIZONTALLY).order(Order.SAMPLE_TEXT).justification(Justification.LEFT)
        key.hide()
        self.assertEqual(key.script(), "set key off\n")

    def test_shown_key_emits_fields_in_fixed_order(self) -> None:
        key = (
            KeyProperties()
            .boxed(True)
            .title("Legend")
            .order(Order.TEXT_SAMPLE)
            .justification(Justification.RIGHT)
            .stacked(Stacked.VERTICALLY)
            .position(Position.inside(Vertical.TOP, Horizontal.RIGHT))
        )
        self.assertEqual(
            key.script(),
            "set key on inside top right vertical Right noreverse title 'Legend' box \n",
        )

    def test_show_after_hide_restores_previous_fields(self) -> None:
        key = KeyProperties().position(Position.outside(Vertical.CENTER, Horizontal.CENTER)).title("t")
        before = key.script()
        key.hide()
        self.assertTrue(key.hidden)
        key.show()
        self.assertFalse(key.hidden)
        self.assertEqual(key.script(), before)
        self.assertEqual(before, "set key on outside center center title 't' \n")

    def test_unboxed_key_omits_box(self) -> None:
        key = KeyProperties().boxed(True).boxed(False)
        self.assertEqual(key.script(), "set key on \n")

    def test_title_quotes_are_doubled(self) -> None:
        key = KeyProperties().title("it's")
        self.assertEqual(key.script(), "set key on title 'it''s' \n")

    def test_serialization_is_repeatable(self) -> None:
        key = KeyProperties().title("a").stacked(Stacked.HORIZONTALLY)
        self.assertEqual(key.script(), key.script())

    def test_copy_is_independent(self) -> None:
        key = KeyProperties().title("a")
        clone = key.copy()
        clone.hide()
        self.assertFalse(key.hidden)
        self.assertEqual(key.script(), "set key on title 'a' \n")

    def test_position_rejects_non_position(self) -> None:
        with self.assertRaises(ValueError):
            KeyProperties().position("top right")  # type: ignore[arg-type]

    def test_position_coerces_plain_strings(self) -> None:
        position = Position("inside", "top", "left")
        self.assertIs(position.vertical, Vertical.TOP)
        self.assertIs(position.horizontal, Horizontal.LEFT)
        self.assertEqual(KeyProperties().position(position).script(), "set key on inside top left \n")

    def test_position_rejects_unknown_values_at_construction(self) -> None:
        for args in (("inside", "middle", "left"), ("inside", "top", "up"), ("above", "top", "left")):
            with self.subTest(args=args):
                with self.assertRaises(ValueError):
                    Position(*args)  # type: ignore[arg-type]

    def test_figure_configures_single_key(self) -> None:
        fig = Figure()
        self.assertIsNone(fig.key)
        fig.configure_key(lambda k: k.title("one"))
        first = fig.key
        fig.configure_key(lambda k: k.boxed(True))
        self.assertIs(fig.key, first)
        self.assertIn("set key on title 'one' box \n", fig.script())


if __name__ == "__main__":
    unittest.main()
