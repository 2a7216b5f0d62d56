# datashed

A small command-line tool and library for setting up *datasheds*:
directories that hold data together with a `config.toml` describing it
(name, version, description and authors).

## Installation

```
pip install .
```

## Creating a datashed

```
datashed init my-data
```

This creates `my-data/` (relative to the current directory) containing:

- `data/` – where the data lives
- `tmp/` – scratch space
- `config.toml` – the datashed's metadata
- a Git repository with a `.gitignore` that ignores `data/`, `tmp/` and
  `index.ipc` (unless `--vcs none` is given)

Without a directory argument the current directory is initialized.

### Options

| Option | Meaning |
| --- | --- |
| `-n, --name NAME` | Name of the datashed (defaults to the directory name) |
| `--version VERSION` | Semantic version of the datashed (default `0.1.0`) |
| `-d, --description TEXT` | A short blurb about the datashed |
| `-a, --author AUTHOR` | An author; may be repeated. Defaults to your Git identity |
| `--vcs {git,none}` | Version control system to initialize (default `git`) |
| `-f, --force` | Overwrite an existing `config.toml` |
| `-q, --quiet` | Print nothing on success |
| `-v, --verbose` | Print additional information to standard error |

Running `init` again on an existing datashed is safe: the directories are
kept and the config is left untouched unless `--force` is given.

Example:

```
datashed init --name weather --version 1.0.0 \
    --author "Max Mustermann <m.muster@example.com>" \
    --description "Daily weather observations" weather-data
```

produces a `config.toml` like:

```toml
[metadata]
name = "weather"
version = "1.0.0"
description = "Daily weather observations"
authors = ["Max Mustermann <m.muster@example.com>"]
```

## Using the library

```python
from datashed.config import Config

config = Config.from_path("weather-data/config.toml")
print(config.metadata.name, config.metadata.version)

config.metadata.description = "Updated description"
config.save()
```

`Config.create(path)` makes a fresh config with default metadata that is
written to `path` on `save()`. Loading a missing or malformed file raises
`DatashedError`.