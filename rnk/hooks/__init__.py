"""Hooks for state, effects, focus, scrolling, input, mouse, measurement and terminal I/O."""