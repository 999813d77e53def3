# cliforge

`cliforge` is a library for describing command-line options, collecting
and checking their values, and reading option values from INI-style
configuration. It has these modules:

- `cliforge.option`: the `Option` class. An option has short, long and
  positional names, validators and transforms, links to options it
  needs or excludes, flag default values, a multi-option policy and a
  callback that receives the collected results.
- `cliforge.defaults`: `OptionDefaults`, a set of settings that
  `apply_to` copies onto an option, and the `MultiOptionPolicy` enum
  (`THROW`, `TAKE_LAST`, `TAKE_FIRST`, `JOIN`).
- `cliforge.config`: `ConfigINI` reads INI-style text into `ConfigItem`
  records. `ini_join` joins values with spaces and quotes any value that
  contains whitespace.
- `cliforge.names`: helpers for splitting name strings (`split_names`,
  `get_names`), matching names (`find_member`, `remove_underscore`),
  reading flag values (`to_flag_value`) and splitting on a delimiter
  (`split`).
- `cliforge.errors`: the exceptions. Each one has an `exit_code` taken
  from the `ExitCode` enum.

## Installing

```
pip install cliforge
```

## Options

```python
from cliforge.option import Option

values = []

def store(results):
    values[:] = results
    return True

opt = Option("-v,--vals,vals", "Values to collect", store, None)
opt.type_size(-1)
opt.add_result("1")
opt.add_result("2")
opt.run_callback()

print(opt.get_name())                  # --vals
print(opt.get_name(True, True))        # vals,-v,--vals
print(opt.as_list(int))                # [1, 2]
print(values)                          # ['1', '2']
```

`run_callback` runs the validators on every result first. After that it
checks the number of results against what the option expects. Then it
calls the callback. If the callback returns a false value, it raises
`ConversionError`. If the count is wrong, it raises `ArgumentMismatch`.

A validator takes a value and returns an error message. An empty
message means the value is fine:

```python
opt = Option("--count", "", lambda results: True, None)
opt.check(lambda v: "" if v.isdigit() else "not a number")
opt.add_result("abc")
opt.run_callback()   # raises cliforge.errors.ValidationError: --count: not a number
```

`transform(func)` adds a function that rewrites each value. Transforms
run before the other validators. `each(func)` calls `func` with every
value.

Names are matched with `check_name`, which takes a name with its dashes
or a positional name. Matching is case-sensitive unless
`opt.ignore_case = True` is set. Underscores count unless
`opt.ignore_underscore = True` is set.

`needs` and `excludes` take options. They also take names, which they
look up among the options of the option's parent. `excludes` links both
options to each other.

`as_type(convert)` converts the single result, or the default string if
there are no results. It follows the multi-option policy when there are
several results.

## Defaults

```python
from cliforge.defaults import MultiOptionPolicy, OptionDefaults
from cliforge.option import Option

defaults = OptionDefaults(group="Advanced", required=True).take_last()
opt = defaults.apply_to(Option("--level"))
print(opt.group, opt.required, opt.multi_option_policy is MultiOptionPolicy.TAKE_LAST)
# Advanced True True
```

## Reading configuration

```python
from cliforge.config import ConfigINI

items = ConfigINI().from_config([
    "[server]",
    "port = 8080",
    "verbose",
])
for item in items:
    print(item.fullname, item.inputs)
# server.port ['8080']
# server.verbose ['ON']
```

Lines starting with `;` are comments. Dotted names add to the parent
list. Values are split on whitespace, and quoted sections are kept
together. `from_config` also accepts a whole string.
`Config.from_file(path)` reads a file in the same way and raises
`FileError` if the file cannot be read. `Config.to_flag(item)` returns
the single input of an item and raises `ConversionError` if the item has
more than one.

## What the package does not do

The package has no application object. It does not parse an argument
list into options, it has no subcommands, and it does not produce help
or usage text. It also provides no command to run. Code that uses it
creates the options, feeds them values with `add_result`, and calls
`run_callback` itself.

## Running the tests

```
pip install -e .[test]
pytest
```