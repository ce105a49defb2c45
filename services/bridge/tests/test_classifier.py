"""Tests for rendered-by / used-in selection and the wrapper heuristic."""

from grab_bridge.classifier import classify, find_rendered_by, find_used_in, is_wrapper
from grab_bridge.trace_parser import Frame, normalize_frames

PREFIX = "/(app-pages-browser)/./"


def _f(file, line, name=None, col=1):
    raw = f"{name} (at {file}:{line}:{col})" if name else f"{file}:{line}:{col}"
    return Frame(raw=raw, name=name, file=file, line=line, col=col)


def _frames(*frames):
    return normalize_frames(frames)


class TestScenarios:
    def test_primitive_inside_shared_component(self):
        frames = _frames(
            _f(PREFIX + "src/components/spring-ui/tab-bar.tsx", 68, col=11),
            _f(PREFIX + "src/components/spring-ui/tab-bar.tsx", 43, col=11),
            _f(PREFIX + "src/components/designer/layout/panels/rightpanel/RightPanel.tsx", 28, "RightPanel", 86),
        )
        result = classify(frames)
        assert result.rendered_by.normalized_file == "src/components/spring-ui/tab-bar.tsx"
        assert result.rendered_by.line == 68
        assert result.used_in.name == "RightPanel"
        assert result.used_in.line == 28

    def test_provider_skipped_for_used_in(self):
        frames = _frames(
            _f(PREFIX + "src/components/designer/layout/CanvasBar.tsx", 21, "CanvasBar", 201),
            _f(PREFIX + "src/components/designer/layout/LayoutContent.tsx", 37, "LayoutContentInner", 11),
            _f(PREFIX + "src/context/CanvasSelectionContext.tsx", 21, "CanvasSelectionProvider", 11),
        )
        result = classify(frames)
        assert result.rendered_by.name == "CanvasBar"
        assert result.rendered_by.line == 21
        assert result.used_in.normalized_file == "src/components/designer/layout/LayoutContent.tsx"
        assert result.used_in.line == 37

    def test_wrapper_directly_above_is_skipped(self):
        frames = _frames(
            _f("/src/Button.tsx", 5, "Button"),
            _f("/src/context/ThemeContext.tsx", 9, "ThemeProvider"),
            _f("/src/Page.tsx", 12, "Page"),
        )
        assert classify(frames).used_in.name == "Page"


class TestRenderedBy:
    def test_empty(self):
        result = classify([])
        assert result.rendered_by is None
        assert result.used_in is None

    def test_no_src_candidates(self):
        frames = _frames(_f("/lib/vendor.js", 3, "Vendor"))
        assert find_rendered_by(frames) is None
        assert classify(frames).used_in is None

    def test_skips_frames_outside_src(self):
        frames = _frames(_f("/lib/vendor.js", 3, "Vendor"), _f("/app/src/Card.tsx", 4, "Card"))
        rendered = find_rendered_by(frames)
        assert rendered.index == 1
        assert rendered.frame.name == "Card"

    def test_named_frame_in_same_file_preferred(self):
        frames = _frames(_f("/src/Card.tsx", 40), _f("/src/Card.tsx", 12, "Card"), _f("/src/Page.tsx", 3, "Page"))
        rendered = find_rendered_by(frames)
        assert rendered.index == 1
        assert rendered.frame.name == "Card"

    def test_named_frame_in_outer_file_does_not_outrank_innermost(self):
        frames = _frames(_f("/src/ui/Chip.tsx", 9), _f("/src/Page.tsx", 3, "Page"))
        rendered = find_rendered_by(frames)
        assert rendered.index == 0
        assert rendered.frame.name is None

    def test_anonymous_accepted_when_nothing_named(self):
        frames = _frames(_f("/src/a.tsx", 2), _f("/src/b.tsx", 3))
        assert find_rendered_by(frames).index == 0


class TestUsedIn:
    def test_falls_back_to_wrapper_in_other_file(self):
        frames = _frames(
            _f("/src/Widget.tsx", 5, "Widget"),
            _f("/src/providers/Store.tsx", 8, "StoreProvider"),
        )
        assert classify(frames).used_in.name == "StoreProvider"

    def test_falls_back_to_rendered_by_itself(self):
        frames = _frames(_f("/src/Widget.tsx", 5, "Widget"), _f("/src/Widget.tsx", 30, "WidgetInner"))
        result = classify(frames)
        assert result.used_in == result.rendered_by

    def test_single_frame(self):
        frames = _frames(_f("/src/Widget.tsx", 5, "Widget"))
        result = classify(frames)
        assert result.used_in is result.rendered_by

    def test_scans_only_outward(self):
        frames = _frames(_f("/src/Inner.tsx", 1), _f("/src/Outer.tsx", 2, "Outer"), _f("/src/Page.tsx", 3, "Page"))
        rendered = find_rendered_by(frames)
        assert rendered.index == 0
        assert find_used_in(frames, rendered).name == "Outer"


class TestIsWrapper:
    def test_path_segments(self):
        (f,) = _frames(_f("/src/context/Theme.tsx", 1, "Theme"))
        assert is_wrapper(f)
        (f,) = _frames(_f("/src/providers/Query.tsx", 1, "Query"))
        assert is_wrapper(f)

    def test_name_parts(self):
        for name in ("AuthProvider", "UserContextBridge", "ErrorBoundary"):
            (f,) = _frames(_f("/src/x.tsx", 1, name))
            assert is_wrapper(f)

    def test_plain_component(self):
        (f,) = _frames(_f("/src/components/Button.tsx", 1, "Button"))
        assert not is_wrapper(f)

    def test_anonymous_frame(self):
        (f,) = _frames(_f("/src/components/Button.tsx", 1))
        assert not is_wrapper(f)

    def test_substring_policy_is_literal(self):
        # ContextMenu is a real component but still matches "Context"
        (f,) = _frames(_f("/src/ContextMenu.tsx", 1, "ContextMenu"))
        assert is_wrapper(f)
