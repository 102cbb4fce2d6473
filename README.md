# rnk

Building blocks for declarative terminal user interfaces: a hook system for
reactive state and effects, focus and scroll management, keyboard and mouse
handler dispatch, a few terminal helpers, and grapheme-aware text measurement.

## Installation

```
pip install rnk
```

## Text measurement

`rnk.layout.measure` computes widths per grapheme cluster, so CJK characters
count as two cells, zero-width characters as none, and emoji sequences are
never split.

```python
from rnk.layout.measure import (
    TextAlign, measure_text_width, measure_text, wrap_text,
    truncate_text, truncate_start, truncate_middle, pad_text,
)

measure_text_width("Hello 世界")           # 10
measure_text("hello\nworld")              # (5, 2)
wrap_text("hello world", 6)               # "hello \nworld"
truncate_text("hello world", 8, "...")    # "hello..."
truncate_start("hello world", 8, "...")   # "...world"
truncate_middle("hello world", 9, "...")  # "hel...rld"
pad_text("hi", 5, TextAlign.CENTER)       # " hi  "
```

`display_width` is an alias of `measure_text_width`. When the width is too
small even for the ellipsis, the truncation functions return as much of the
ellipsis as fits.

## Hooks

A component is a function run through `with_hooks(ctx, fn)` with a
`HookContext` (`rnk.hooks.context`). Hooks keep their state across renders
by call order; effects queued during the render run once it has finished.

```python
from rnk.hooks.context import HookContext, with_hooks
from rnk.hooks.use_signal import use_signal
from rnk.hooks.use_effect import use_effect

ctx = HookContext()

def component():
    count = use_signal(lambda: 0)
    use_effect(lambda: print("count is", count.get()), (count.get(),))
    return count

count = with_hooks(ctx, component)   # prints "count is 0"
count.set(count.get() + 1)
with_hooks(ctx, component)           # value kept; deps changed, prints "count is 1"
```

- `Signal` offers `get()`, `set()`, `update(fn)`, `with_value(fn)` and
  `set_silent()`. `set` and `update` call the context's `render_callback`
  if one is set.
- An effect may return a callable, which is run as its cleanup before the
  next batch of effects. `use_effect_once` schedules its effect only on the
  first render. `deps_hash` gives the hash used to compare dependencies.
- Hooks called outside `with_hooks` raise `RuntimeError`.

## Focus, scrolling and input

- `use_focus(UseFocusOptions(auto_focus=..., is_active=..., id=...))`
  registers a focusable element with the thread's `FocusManager` and returns
  a `FocusState`. `use_focus_manager()` returns a `FocusManagerHandle` with
  `focus_next()`, `focus_previous()`, `focus(id)` and `enable_focus(id, enabled)`;
  navigation wraps around and skips inactive elements.
- `ScrollState` (`rnk.hooks.use_scroll`) tracks offsets, content and viewport
  sizes, keeps offsets within range, and offers paging, `scroll_to_item`,
  `visible_range()` and scroll percentages. `use_scroll()` keeps one per
  component.
- `use_input(handler)` registers a `handler(input, key)`; `dispatch_key_event`
  turns a `KeyEvent` into the typed character and a `Key` of flags
  (`Key.from_event`) and passes both to every handler.
- `use_mouse(handler)` enables mouse mode and registers a handler;
  `dispatch_mouse_event(mouse)` passes a `Mouse` to every handler. `Mouse`
  has `is_click()`, `is_left_click()`, `is_right_click()`, `is_scroll()` and
  `scroll_delta()`.

## Terminal helpers

- `set_window_title(title)` and `clear_window_title()` write the OSC 0 title
  escape to stdout; `title_escape` returns the sequence. `WindowTitleGuard`
  sets the given title again (or an empty one) when its `with` block ends.
- `use_stdout()`, `use_stderr()` and `use_stdin()` return small handles for
  writing, reading a line and checking whether the streams are terminals.
- `use_is_screen_reader_enabled()` reports whether accessibility tools appear
  to be active, judged from environment variables (and, on macOS, the
  VoiceOver setting). The result is cached per thread; override it with
  `set_screen_reader_enabled` and reset it with `clear_screen_reader_cache`.
- `use_app()` returns the current `AppContext`, set with `set_app_context`;
  its `exit()` sets the shared `exit_flag` event.
- `MeasureContext` holds `Layout`s by element id; with one set through
  `set_measure_context`, `measure_element(id)` returns `Dimensions`.
  `use_measure()` returns a `MeasureRef` and a function giving the tracked
  element's dimensions.

## What this package does not do

There is no element tree, no component library, no layout engine and no
renderer: nothing here draws to the terminal, reads keys or mouse events from
it, or runs an event loop. Key and mouse events must be built and dispatched
by the caller, and layouts for `MeasureContext` must come from elsewhere.
`AppContext` only carries the exit request; it does not switch screen modes
or print above a running interface. There is no command-line program.