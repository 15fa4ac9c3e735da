from pathlib import Path

# Link markers
SYMLINK_MARKER = "-s-"
HARDLINK_MARKER = "-h-"
OPEN_FLAGS = ("-o", "--open")

# Editor environment variables
FILE_EDITOR_ENV = "_MK_FILE_EDITOR"
DIR_EDITOR_ENV = "_MK_DIR_EDITOR"

# Permission bits for created entries (umask still applies)
DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o755

# Configuration
CONFIG_DIRNAME = ".mk"
CONFIG_FILENAME = "config.yml"
DEFAULT_CONFIG_RELPATH = Path(CONFIG_DIRNAME) / CONFIG_FILENAME

USAGE = """\
Usage:
       mk <path> [-s- <target> | -h- <target>] ...
mk handles creating files, directories and links.
It unifies the unix commands 'touch' 'mkdir' and 'ln'.

Paths ending on / (slash) indicate a directory, else it's a file.
  ~/ $ mk main.py   # create file main.py
  ~/ $ mk docs/     # create docs folder

Missing directories are created by default.
  ~/ $ mk non/existent/parent/and/file.txt   # create missing dirs and file.txt

Create symbolic links with -s- and hard links with -h-. Think of labeled edges.
  ~/ $ mk symname -s- target/file   # create symlink symname -s-> target/file
  ~/ $ mk alias -h- target/file     # create hardlink alias -h-> target/file

Open the result in an editor with -o / --open.
  ~/ $ mk -o notes.md   # create notes.md, then open it with $_MK_FILE_EDITOR
  ~/ $ mk -o src/       # create src/, then open it with $_MK_DIR_EDITOR
"""
