"""Runtime core: elements, layout, buffer, renderer, effects, runtime.

// [LAW:one-way-deps] core never imports termdash.app or termdash.tui.
"""
