"""Unit tests for the SVG render backend and documents."""

import base64
import xml.etree.ElementTree as ET

import pytest

from strokeport.domain import Aabb, Color, VectorImage
from strokeport.exceptions import InvalidBoundsError, RenderError, SvgError
from strokeport.render import Svg, SvgRenderContext, fmt, svg_tag
from strokeport.render.svg import XML_HEADER

BOUNDS = Aabb(mins=(10.0, 20.0), maxs=(30.0, 50.0))


class TestFmt:
    """Tests for float formatting."""

    def test_trailing_zeros_stripped(self) -> None:
        """Test that integral values have no fraction."""
        assert fmt(1.0) == "1"
        assert fmt(100.0) == "100"
        assert fmt(-10.0) == "-10"

    def test_precision(self) -> None:
        """Test fixed precision."""
        assert fmt(2.5) == "2.5"
        assert fmt(1.23456) == "1.235"

    def test_negative_zero(self) -> None:
        """Test that tiny negative values print as zero."""
        assert fmt(-0.0001) == "0"
        assert fmt(0.0) == "0"


class TestSvgRenderContext:
    """Tests for SvgRenderContext class."""

    def test_save_restore(self) -> None:
        """Test state level depth."""
        ctx = SvgRenderContext()
        ctx.save()
        ctx.save()
        assert ctx.depth == 2
        ctx.restore()
        ctx.restore()
        assert ctx.depth == 0

    def test_restore_without_save(self) -> None:
        """Test that unbalanced restore fails."""
        with pytest.raises(RenderError):
            SvgRenderContext().restore()

    def test_scoped_restores_on_error(self) -> None:
        """Test that scoped() restores when the body raises."""
        ctx = SvgRenderContext()
        with pytest.raises(ValueError):
            with ctx.scoped():
                assert ctx.depth == 1
                raise ValueError("boom")
        assert ctx.depth == 0

    def test_clip_rect(self) -> None:
        """Test that clipping nests drawing in a clipped group."""
        ctx = SvgRenderContext()
        with ctx.scoped():
            ctx.clip_rect(BOUNDS)
            ctx.fill_rect(BOUNDS, Color.BLACK)
        ctx.fill_rect(BOUNDS, Color.WHITE)

        root = ctx.finish(BOUNDS)
        clip = root.find(f"{svg_tag('defs')}/{svg_tag('clipPath')}")
        assert clip is not None
        clip_id = clip.get("id")
        assert clip_id.startswith("strokeport-")
        assert clip_id.endswith("-clip1")

        clipped = [g for g in root.iter(svg_tag("g")) if g.get("clip-path")]
        assert len(clipped) == 1
        assert clipped[0].get("clip-path") == f"url(#{clip_id})"
        assert [r.get("fill") for r in clipped[0].iter(svg_tag("rect"))] == ["#000000"]

        # The fill after restore is outside of the clip
        content = root.find(svg_tag("g"))
        assert content is not None
        assert content[-1].tag == svg_tag("rect")
        assert content[-1].get("fill") == "#FFFFFF"

    def test_clip_ids_differ_between_documents(self) -> None:
        """Test that each recording uses its own clip id prefix."""
        ids = []
        for _ in range(2):
            ctx = SvgRenderContext()
            ctx.clip_rect(BOUNDS)
            clip = ctx.finish(BOUNDS).find(f"{svg_tag('defs')}/{svg_tag('clipPath')}")
            assert clip is not None
            ids.append(clip.get("id"))
        assert ids[0] != ids[1]

    def test_clip_id_unlike_embedded_ids(self) -> None:
        """Test that clip ids do not collide with ids of embedded documents."""
        image = VectorImage(
            rectangle=BOUNDS,
            svg_data=(
                '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
                '<defs><clipPath id="clip1"><rect width="1" height="1"/></clipPath></defs>'
                '<rect width="10" height="10" clip-path="url(#clip1)"/></svg>'
            ),
        )
        ctx = SvgRenderContext()
        with ctx.scoped():
            ctx.clip_rect(BOUNDS)
            image.draw(ctx, 1.0)

        root = ctx.finish(BOUNDS)
        ids = [el.get("id") for el in root.iter() if el.get("id") is not None]
        assert len(ids) == 2
        assert len(set(ids)) == 2
        assert "clip1" in ids

    def test_clip_rect_invalid(self) -> None:
        """Test that clipping to invalid bounds fails."""
        with pytest.raises(InvalidBoundsError):
            SvgRenderContext().clip_rect(Aabb.new_invalid())

    def test_draw_path_paint(self) -> None:
        """Test fill and stroke attributes."""
        ctx = SvgRenderContext()
        ctx.draw_path("M0 0L1 1", stroke=Color(1.0, 0.0, 0.0, 0.5), stroke_width=2.0)
        path = next(ctx.finish(BOUNDS).iter(svg_tag("path")))
        assert path.get("fill") == "none"
        assert path.get("stroke") == "#FF0000"
        assert path.get("stroke-opacity") == "0.5"
        assert path.get("stroke-width") == "2"

    def test_draw_path_empty(self) -> None:
        """Test that empty path data draws nothing."""
        ctx = SvgRenderContext()
        ctx.draw_path("", stroke=Color.BLACK)
        assert list(ctx.finish(BOUNDS).iter(svg_tag("path"))) == []

    def test_draw_image(self) -> None:
        """Test that raster data is embedded as data URI."""
        ctx = SvgRenderContext()
        ctx.draw_image(BOUNDS, b"\x89PNG")
        image = next(ctx.finish(BOUNDS).iter(svg_tag("image")))
        assert image.get("href") == "data:image/png;base64," + base64.b64encode(
            b"\x89PNG"
        ).decode("ascii")
        assert image.get("width") == "20"
        assert image.get("height") == "30"

    def test_finish(self) -> None:
        """Test root element attributes."""
        root = SvgRenderContext().finish(BOUNDS)
        assert root.tag == svg_tag("svg")
        assert root.get("viewBox") == "10 20 20 30"
        assert root.find(svg_tag("defs")) is None

    def test_vector_image(self) -> None:
        """Test that vector images are nested as svg viewports."""
        image = VectorImage(
            rectangle=BOUNDS,
            svg_data=(
                '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
                '<rect width="10" height="10"/></svg>'
            ),
        )
        ctx = SvgRenderContext()
        image.draw(ctx, 1.0)
        root = ctx.finish(BOUNDS)
        nested = [el for el in root.iter(svg_tag("svg")) if el is not root]
        assert len(nested) == 1
        assert nested[0].get("x") == "10"
        assert nested[0].get("viewBox") == "0 0 10 10"

    def test_vector_image_without_viewbox(self) -> None:
        """Test that a vector image with only a size is stretched to its rectangle."""
        image = VectorImage(
            rectangle=Aabb(mins=(0.0, 0.0), maxs=(100.0, 100.0)),
            svg_data=(
                '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
                '<rect width="10" height="10"/></svg>'
            ),
        )
        ctx = SvgRenderContext()
        image.draw(ctx, 1.0)
        root = ctx.finish(BOUNDS)
        nested = [el for el in root.iter(svg_tag("svg")) if el is not root]
        assert len(nested) == 1
        assert nested[0].get("viewBox") == "0 0 10 10"
        assert nested[0].get("width") == "100"
        assert nested[0].get("height") == "100"
        assert nested[0].get("preserveAspectRatio") == "none"

    def test_vector_image_size_with_units(self) -> None:
        """Test that sizes in other units do not produce a viewBox."""
        image = VectorImage(
            rectangle=BOUNDS,
            svg_data='<svg xmlns="http://www.w3.org/2000/svg" width="10mm" height="10mm"/>',
        )
        ctx = SvgRenderContext()
        image.draw(ctx, 1.0)
        root = ctx.finish(BOUNDS)
        nested = [el for el in root.iter(svg_tag("svg")) if el is not root]
        assert nested[0].get("viewBox") is None
        assert nested[0].get("width") == "20"

    def test_vector_image_invalid(self) -> None:
        """Test that unparsable vector images fail to draw."""
        image = VectorImage(rectangle=BOUNDS, svg_data="<svg")
        with pytest.raises(RenderError):
            image.draw(SvgRenderContext(), 1.0)


class TestSvg:
    """Tests for Svg class."""

    def _svg(self) -> Svg:
        return Svg.gen_with_context(lambda ctx: ctx.fill_rect(BOUNDS, Color.BLACK), BOUNDS)

    def test_gen_with_context(self) -> None:
        """Test that generation keeps document coordinates."""
        svg = self._svg()
        assert svg.bounds == BOUNDS
        assert ET.fromstring(svg.svg_data).get("viewBox") == "10 20 20 30"

    def test_gen_with_context_invalid_bounds(self) -> None:
        """Test that generation rejects invalid bounds."""
        with pytest.raises(InvalidBoundsError):
            Svg.gen_with_context(lambda ctx: None, Aabb.new_invalid())

    def test_simplify(self) -> None:
        """Test that simplify moves the document to the origin."""
        svg = self._svg()
        svg.simplify()

        assert svg.bounds == Aabb(mins=(0.0, 0.0), maxs=(20.0, 30.0))
        root = ET.fromstring(svg.svg_data)
        assert root.get("viewBox") == "0 0 20 30"
        assert len(root) == 1
        assert root[0].get("transform") == "translate(-10 -20)"
        assert next(root.iter(svg_tag("rect"))).get("x") == "10"

    def test_simplify_unparsable(self) -> None:
        """Test that broken documents cannot be simplified."""
        with pytest.raises(SvgError):
            Svg(svg_data="<svg", bounds=BOUNDS).simplify()

    def test_simplify_wrong_root(self) -> None:
        """Test that non-svg documents cannot be simplified."""
        with pytest.raises(SvgError, match="unexpected root"):
            Svg(svg_data='<g xmlns="http://www.w3.org/2000/svg"/>', bounds=BOUNDS).simplify()

    def test_simplify_invalid_bounds(self) -> None:
        """Test that documents with invalid bounds cannot be simplified."""
        svg = self._svg()
        svg.bounds = Aabb.new_invalid()
        with pytest.raises(SvgError):
            svg.simplify()

    def test_to_string(self) -> None:
        """Test XML header."""
        text = self._svg().to_string()
        assert text.startswith(XML_HEADER)
        assert self._svg().to_bytes() == text.encode("utf-8")
