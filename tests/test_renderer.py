"""Tests for gitwok.commit.renderer module."""

from gitwok.commit import make_commit_message, render_commit_message, render_header


class TestRenderHeader:
    """Tests for render_header function."""

    def test_type_only(self):
        assert render_header(make_commit_message("fix", "", False, "hello")) == "fix: hello"

    def test_scope(self):
        assert render_header(make_commit_message("feat", "api", False, "add")) == "feat(api): add"

    def test_breaking_without_scope(self):
        assert render_header(make_commit_message("feat", "", True, "drop")) == "feat!: drop"


class TestRenderCommitMessage:
    """Tests for render_commit_message function."""

    def test_header_only(self):
        msg = make_commit_message("fix", "", False, "hello", "", [])

        assert render_commit_message(msg) == "fix: hello\n"

    def test_scope_and_breaking(self):
        msg = make_commit_message("fix", "lib", True, "fix bug", "", [])

        assert render_commit_message(msg) == "fix(lib)!: fix bug\n"

    def test_body(self):
        msg = make_commit_message("docs", "", False, "fix typo", "msg body", [])

        assert render_commit_message(msg) == "docs: fix typo\n\nmsg body\n"

    def test_multiline_body_verbatim(self):
        msg = make_commit_message("docs", "", False, "d", "para one\n\npara two", [])

        assert render_commit_message(msg) == "docs: d\n\npara one\n\npara two\n"

    def test_footers_without_body(self):
        msg = make_commit_message("test", "x", False, "d", "", ["Acked-by: RT"])

        assert render_commit_message(msg) == "test(x): d\n\nAcked-by: RT\n"

    def test_footers_with_body(self):
        """Test that exactly one blank line separates body and footers."""
        msg = make_commit_message("test", "x", False, "d", "body", ["Acked-by: RT"])

        assert render_commit_message(msg) == "test(x): d\n\nbody\n\nAcked-by: RT\n"

    def test_consecutive_footers(self):
        msg = make_commit_message(
            "feat", "", True, "d", "", ["Refs #1", "BREAKING CHANGE: api", "Acked-by: "]
        )

        assert render_commit_message(msg) == (
            "feat!: d\n\nRefs #1\nBREAKING CHANGE: api\nAcked-by: \n"
        )

    def test_multiline_footer_verbatim(self):
        msg = make_commit_message("fix", "", False, "d", "", ["Acked-By: RT\nsecond line"])

        assert render_commit_message(msg) == "fix: d\n\nAcked-By: RT\nsecond line\n"

    def test_method_matches_function(self):
        msg = make_commit_message("fix", "a", False, "d", "b", ["Refs: 1"])

        assert msg.render() == render_commit_message(msg)

    def test_single_trailing_newline(self):
        msg = make_commit_message("fix", "", False, "d", "body\n\n", ["Refs: 1\n\n"])

        rendered = render_commit_message(msg)
        assert rendered.endswith("Refs: 1\n")
        assert not rendered.endswith("\n\n")
