"""
Test component creation, decorators and tailwind restyling
"""

import math
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import xtensions
from xtensions import BuildContext, Size, UnresolvedColorError
from xtensions.dsl import (
    Container, Row, Column, Text,
    ClipRRect, BackdropFilter, Opacity, SizedBox, SingleChildScrollView,
    Style, Layout, Color, BorderRadius, Colors,
)
from xtensions.core.types import (
    ComponentType, Dimension, ImageFilter, ScrollPhysics,
    MainAxisSize, MainAxisAlignment, CrossAxisAlignment,
)


class TestBasicComponents:
    """Test basic component creation"""

    def test_text_component(self):
        text = Text(text="Hello, World!")
        assert text.type.to_string() == "Text"
        assert text.properties["textContent"] == "Hello, World!"

    def test_container_child(self):
        text = Text(text="inside")
        container = Container(child=text)
        assert container.type == ComponentType.CONTAINER
        assert container.child is text

    def test_string_type(self):
        assert xtensions.Component(type="sized_box").type == ComponentType.SIZED_BOX

    def test_column_component(self):
        col = Column(
            layout=Layout(justify_content=MainAxisAlignment.CENTER),
            children=[Text(text="Item 1"), Text(text="Item 2")],
        )
        assert col.type.to_string() == "Column"
        assert col.layout.flex_direction == "column"
        assert col.layout.justify_content == MainAxisAlignment.CENTER
        assert len(col.children) == 2

    def test_row_ignores_layout_direction(self):
        row = Row(layout=Layout(flex_direction="column"))
        assert row.layout.flex_direction == "row"

    def test_add_children(self):
        col = Column()
        col.add_child(Text(text="a")).add_children(Text(text="b"), Text(text="c"))
        assert len(col.children) == 3

    def test_caller_properties_not_modified(self):
        props = {"id": "greeting"}
        text = Text(text="x", properties=props)
        assert props == {"id": "greeting"}
        assert text.properties == {"id": "greeting", "textContent": "x"}

        shared = {}
        Opacity(Text(), 0.5, properties=shared)
        SingleChildScrollView(Text(), properties=shared)
        assert shared == {}


class TestBlur:
    """Test the blur decorator"""

    def test_defaults(self):
        text = Text(text="frosted")
        blurred = text.blur()

        assert isinstance(blurred, ClipRRect)
        assert blurred.border_radius == BorderRadius.zero
        backdrop = blurred.child
        assert isinstance(backdrop, BackdropFilter)
        assert backdrop.filter == ImageFilter(sigma_x=10, sigma_y=10)
        assert backdrop.child is text

    def test_custom_sigma_and_radius(self):
        blurred = Text().blur(sigma_x=3, sigma_y=0, border_radius=BorderRadius.circular(12))
        assert blurred.border_radius == BorderRadius.circular(12)
        assert blurred.child.filter == ImageFilter.blur(3, 0)


class TestOpacity:
    """Test the with_opacity decorator"""

    def test_with_opacity(self):
        text = Text()
        faded = text.with_opacity(0.25)
        assert isinstance(faded, Opacity)
        assert faded.opacity == 0.25
        assert faded.child is text

    @pytest.mark.parametrize("value", [-0.1, 1.01])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            Text().with_opacity(value)


class TestSized:
    """Test the sized decorator"""

    def test_both_axes(self):
        box = Text().sized(w=100, h=50)
        assert isinstance(box, SizedBox)
        assert box.style.width == Dimension(100)
        assert box.style.height == Dimension(50)

    def test_unconstrained_axis(self):
        box = Text().sized(w=100)
        assert box.style.height is None


class TestScrolls:
    """Test the scrolls decorator"""

    def test_default_physics(self):
        view = Column().scrolls()
        assert isinstance(view, SingleChildScrollView)
        assert view.physics == ScrollPhysics.ALWAYS_SCROLLABLE

    def test_custom_physics(self):
        assert Column().scrolls(physics=ScrollPhysics.BOUNCING).physics == ScrollPhysics.BOUNCING

    def test_chained_decorators(self):
        text = Text(text="x")
        page = text.sized(w=10, h=10).with_opacity(0.5).blur().scrolls()
        assert isinstance(page, SingleChildScrollView)
        assert isinstance(page.child, ClipRRect)
        assert page.child.child.child.child.child is text


class TestFlexTailwind:
    """Test tailwind() on Row and Column"""

    def test_column(self):
        children = [Text(text="a"), Text(text="b")]
        col = Column(children=children).tailwind("min main-start cross-center")

        assert isinstance(col, Column)
        assert col.layout.main_axis_size == MainAxisSize.MIN
        assert col.layout.justify_content == MainAxisAlignment.START
        assert col.layout.align_items == CrossAxisAlignment.CENTER
        assert col.children == children

    def test_row(self):
        row = Row(children=[Text()]).tailwind("main-sb cross-stretch")
        assert isinstance(row, Row)
        assert row.layout.flex_direction == "row"
        assert row.layout.main_axis_size == MainAxisSize.MAX
        assert row.layout.justify_content == MainAxisAlignment.SPACE_BETWEEN
        assert row.layout.align_items == CrossAxisAlignment.STRETCH

    def test_receiver_untouched(self):
        row = Row()
        row.tailwind("main-end")
        assert row.layout.justify_content is None

    def test_no_background_needed(self):
        assert Column().tailwind("bg-nope-1").layout.main_axis_size == MainAxisSize.MAX


class TestContainerTailwind:
    """Test tailwind() on Container"""

    def test_full_style(self):
        context = BuildContext(size=Size(300, 400))
        child = Text(text="card")
        container = Container(child=child).tailwind("w-full h-1/2 bg-red-500 rounded-md", context)

        assert isinstance(container, Container)
        assert container.style.width.is_infinite
        assert container.style.height == Dimension(200)
        assert container.style.background_color == Colors.RED[500]
        assert container.style.border_radius == BorderRadius.circular(16)
        assert container.child is child

    def test_unset_sizes_are_zero(self):
        container = Container().tailwind("bg-white-1")
        assert container.style.width == Dimension(0)
        assert container.style.height == Dimension(0)

    def test_requires_background(self):
        with pytest.raises(UnresolvedColorError):
            Container().tailwind("w-full rounded-md")


class TestStyle:
    """Test Style and color helpers"""

    def test_color_from_hex(self):
        color = Color.from_hex("#ff0000")
        assert (color.r, color.g, color.b) == (255, 0, 0)

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            Color.from_hex("#12345")

    def test_from_argb(self):
        assert Color.from_argb(0x80FF0000) == Color(255, 0, 0, 128 / 255.0)

    def test_infinite_dimension(self):
        assert Dimension(math.inf).is_infinite
        assert Dimension(math.inf).to_kir_dict() == {"value": "infinity"}

    def test_numeric_dimensions(self):
        style = Style(width=120, height=2.5)
        assert style.width == Dimension(120)
        assert style.height.to_kir_dict() == {"value": "2.5px"}

    def test_string_dimension_rejected(self):
        """Only pixel numbers and infinity are dimensions"""
        with pytest.raises(TypeError):
            Dimension("50%")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
