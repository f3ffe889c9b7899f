from __future__ import annotations

import logging
import unittest

import numpy as np

from plotscript import (
    AxisRegistry,
    Axis,
    CandlestickProperties,
    Candlesticks,
    Color,
    Figure,
    InvalidLineWidth,
    LineType,
    Rgb,
)


class CandlestickPropertiesTests(unittest.TestCase):
    def test_default_fragment(self) -> None:
        self.assertEqual(CandlestickProperties().script(), "with candlesticks lt 1 notitle")

    def test_full_fragment_order(self) -> None:
        props = (
            CandlestickProperties()
            .label("AAPL")
            .color(Color.DARK_VIOLET)
            .line_width(1.5)
            .line_type(LineType.DASH)
        )
        self.assertEqual(
            props.script(),
            "with candlesticks lt 2 lw 1.5 lc rgb 'dark-violet' title 'AAPL'",
        )

    def test_positive_line_widths_are_emitted_verbatim(self) -> None:
        for width, text in ((0.25, "0.25"), (1.0, "1"), (2, "2"), (3.75, "3.75"), (1e-3, "0.001")):
            with self.subTest(width=width):
                self.assertIn(f" lw {text} ", CandlestickProperties().line_width(width).script())

    def test_non_positive_line_width_is_rejected_at_setter(self) -> None:
        for width in (0, 0.0, -1, -0.5, float("nan"), float("-inf")):
            with self.subTest(width=width):
                props = CandlestickProperties()
                with self.assertRaises(InvalidLineWidth):
                    props.line_width(width)
                self.assertNotIn("lw", props.script())

    def test_invalid_line_width_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            CandlestickProperties().line_width(-2)

    def test_rgb_color_renders_hex(self) -> None:
        props = CandlestickProperties().color(Rgb(255, 0, 16))
        self.assertIn("lc rgb '#ff0010' ", props.script())
        self.assertIn("lc rgb '#0a0b0c' ", CandlestickProperties().color((10, 11, 12)).script())

    def test_label_with_quote_is_escaped(self) -> None:
        self.assertTrue(CandlestickProperties().label("Q1 '24").script().endswith("title 'Q1 ''24'"))

    def test_serialization_is_repeatable(self) -> None:
        props = CandlestickProperties().label("x").line_width(2)
        self.assertEqual(props.script(), props.script())


class CandlesticksPlotTests(unittest.TestCase):
    def test_columns_follow_candlestick_order(self) -> None:
        element = Candlesticks(
            x=[1, 2],
            whisker_min=[10, 20],
            box_min=[11, 21],
            box_high=[13, 23],
            whisker_high=[14, 24],
        )
        plot = element.build(AxisRegistry())
        self.assertEqual(
            plot.data.rows(),
            [(1.0, 11.0, 10.0, 14.0, 13.0), (2.0, 21.0, 20.0, 24.0, 23.0)],
        )
        self.assertEqual(plot.data.using(), "1:2:3:4:5")
        self.assertEqual(plot.fragment, "with candlesticks lt 1 notitle")

    def test_shortest_sequence_truncates_rows(self) -> None:
        element = Candlesticks(
            x=[1, 2, 3],
            whisker_min=[0, 0],
            box_min=[1, 1, 1],
            box_high=[2, 2, 2],
            whisker_high=[3, 3, 3],
        )
        plot = element.build(AxisRegistry())
        self.assertEqual(plot.data.nrows, 2)

    def test_truncation_is_logged_at_debug(self) -> None:
        element = Candlesticks(x=[1, 2, 3], whisker_min=[0], box_min=[1], box_high=[2], whisker_high=[3])
        with self.assertLogs("plotscript.data", level=logging.DEBUG) as logs:
            element.build(AxisRegistry())
        self.assertTrue(any("truncating" in line for line in logs.output))

    def test_scale_factors_come_from_bottom_x_left_y(self) -> None:
        axes = AxisRegistry()
        axes.configure(Axis.BOTTOM_X, lambda a: a.scale_factor(10))
        axes.configure(Axis.LEFT_Y, lambda a: a.scale_factor(0.5))
        axes.configure(Axis.RIGHT_Y, lambda a: a.scale_factor(100))
        element = Candlesticks(x=[1], whisker_min=[2], box_min=[4], box_high=[6], whisker_high=[8])
        plot = element.build(axes)
        self.assertEqual(plot.data.rows(), [(10.0, 2.0, 1.0, 4.0, 3.0)])

    def test_configure_callback_shapes_fragment(self) -> None:
        fig = Figure()
        fig.plot(
            Candlesticks(
                x=np.arange(3),
                whisker_min=(0, 0, 0),
                box_min=(1, 1, 1),
                box_high=(2, 2, 2),
                whisker_high=(3, 3, 3),
            ),
            lambda p: p.label("daily").line_width(2).color(Color.RED),
        )
        self.assertEqual(len(fig.plots), 1)
        self.assertEqual(fig.plots[0].fragment, "with candlesticks lt 1 lw 2 lc rgb 'red' title 'daily'")

    def test_generators_are_consumed_once(self) -> None:
        element = Candlesticks(
            x=(i for i in range(4)),
            whisker_min=[0] * 4,
            box_min=[1] * 4,
            box_high=[2] * 4,
            whisker_high=[3] * 4,
        )
        self.assertEqual(element.build(AxisRegistry()).data.nrows, 4)


if __name__ == "__main__":
    unittest.main()
