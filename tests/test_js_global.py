"""Tests for the global settings object."""

from js_global import Glob, glob


class TestGlob:
    """copy, load and reset."""

    def test_defaults(self):
        g = Glob()

        assert g.g_print_stack is False
        assert g.g_warn_large_maps is True
        assert g.g_large_map_size == 512

    def test_copy_is_independent(self):
        glob.g_large_map_size = 7
        g = glob.copy()
        glob.g_large_map_size = 9

        assert g.g_large_map_size == 7

    def test_load(self):
        g = Glob()
        g.g_print_stack = True
        glob.load(g)

        assert glob.g_print_stack is True

    def test_load_only_copies_settings(self):
        g = Glob()
        g.other = "not a setting"
        glob.load(g)

        assert not hasattr(glob, "other")

    def test_reset_restores_defaults(self):
        glob.g_large_map_size = 3
        glob.g_warn_large_maps = False
        glob.reset()

        assert glob.g_large_map_size == 512
        assert glob.g_warn_large_maps is True

    def test_instances_do_not_share_settings(self):
        a = Glob()
        b = Glob()
        a.g_large_map_size = 1

        assert b.g_large_map_size == 512
