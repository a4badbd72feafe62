# src/bashpy/cheatsheet.py
"""
The Bash to Python idiom table and its Markdown rendering.
"""

from dataclasses import dataclass
from typing import Iterable, List

from .enums import Topic


@dataclass(frozen=True)
class Idiom:
    """One Bash snippet and its Python equivalent."""
    topic: Topic
    title: str
    bash: str
    python: str


IDIOMS = [
    # Variables
    Idiom(Topic.VARIABLES, "Assign and print",
          'name="world"\necho "Hello, $name"',
          'name = "world"\nprint(f"Hello, {name}")'),
    Idiom(Topic.VARIABLES, "Default value",
          'echo "${NAME:-world}"',
          'print(name or "world")'),

    # Conditionals
    Idiom(Topic.CONDITIONALS, "If / else",
          'if [ "$count" -gt 10 ]; then\n  echo big\nelse\n  echo small\nfi',
          'if count > 10:\n    print("big")\nelse:\n    print("small")'),
    Idiom(Topic.CONDITIONALS, "File exists",
          'if [ -f config.json ]; then echo yes; fi',
          'from pathlib import Path\n\nif Path("config.json").is_file():\n    print("yes")'),

    # Loops
    Idiom(Topic.LOOPS, "Loop over a range",
          'for i in {1..5}; do\n  echo "$i"\ndone',
          'for i in range(1, 6):\n    print(i)'),
    Idiom(Topic.LOOPS, "Read a file line by line",
          'while IFS= read -r line; do\n  echo "$line"\ndone < input.txt',
          'with open("input.txt") as fh:\n    for line in fh:\n        print(line.rstrip("\\n"))'),

    # Arrays
    Idiom(Topic.ARRAYS, "Create, append, iterate",
          'fruits=(apple banana)\nfruits+=(cherry)\nfor f in "${fruits[@]}"; do echo "$f"; done',
          'fruits = ["apple", "banana"]\nfruits.append("cherry")\nfor f in fruits:\n    print(f)'),
    Idiom(Topic.ARRAYS, "Length",
          'echo "${#fruits[@]}"',
          'print(len(fruits))'),

    # Functions
    Idiom(Topic.FUNCTIONS, "Define and call",
          'greet() {\n  local name="${1:-world}"\n  echo "Hello, $name"\n}\ngreet Ada',
          'def greet(name="world"):\n    return f"Hello, {name}"\n\nprint(greet("Ada"))'),

    # File I/O
    Idiom(Topic.FILE_IO, "Write and read a file",
          'echo "hello" > out.txt\ncat out.txt',
          'from pathlib import Path\n\nPath("out.txt").write_text("hello\\n")\nprint(Path("out.txt").read_text(), end="")'),
    Idiom(Topic.FILE_IO, "Append",
          'echo "more" >> out.txt',
          'with open("out.txt", "a") as fh:\n    fh.write("more\\n")'),

    # Arithmetic
    Idiom(Topic.ARITHMETIC, "Integer math",
          'total=$(( 3 * (4 + 5) ))\necho $(( total / 2 ))',
          'total = 3 * (4 + 5)\nprint(total // 2)'),
    Idiom(Topic.ARITHMETIC, "Floating point",
          'echo "scale=2; 10 / 3" | bc',
          'print(f"{10 / 3:.2f}")'),

    # Command substitution
    Idiom(Topic.COMMAND_SUBSTITUTION, "Capture command output",
          'today=$(date +%F)',
          'import subprocess\n\ntoday = subprocess.run(\n    ["date", "+%F"], capture_output=True, text=True, check=True\n).stdout.strip()'),

    # Environment variables
    Idiom(Topic.ENVIRONMENT, "Read with a default",
          'echo "${HOME}"\necho "${LOG_LEVEL:-info}"',
          'import os\n\nprint(os.environ["HOME"])\nprint(os.environ.get("LOG_LEVEL", "info"))'),
    Idiom(Topic.ENVIRONMENT, "Set for a child process",
          'LOG_LEVEL=debug ./run.sh',
          'import os\nimport subprocess\n\nsubprocess.run(["./run.sh"], env={**os.environ, "LOG_LEVEL": "debug"})'),

    # Strings
    Idiom(Topic.STRINGS, "Length, slice, replace",
          's="hello world"\necho "${#s}" "${s:0:5}" "${s/world/there}"',
          's = "hello world"\nprint(len(s), s[:5], s.replace("world", "there", 1))'),
    Idiom(Topic.STRINGS, "Upper case, split",
          'echo "${s^^}"\nIFS=" " read -ra parts <<< "$s"',
          'print(s.upper())\nparts = s.split()'),

    # Regex
    Idiom(Topic.REGEX, "Match and capture",
          'if [[ "$v" =~ ^v([0-9]+)\\.([0-9]+)$ ]]; then\n  echo "${BASH_REMATCH[1]}"\nfi',
          'import re\n\nm = re.fullmatch(r"v(\\d+)\\.(\\d+)", v)\nif m:\n    print(m.group(1))'),
    Idiom(Topic.REGEX, "Count matching lines",
          'grep -c ERROR app.log',
          'with open("app.log") as fh:\n    print(sum(1 for line in fh if "ERROR" in line))'),

    # Glob
    Idiom(Topic.GLOB, "Files matching a pattern",
          'for f in *.log; do echo "$f"; done',
          'from pathlib import Path\n\nfor f in sorted(Path(".").glob("*.log")):\n    print(f.name)'),
    Idiom(Topic.GLOB, "Large files in this directory",
          'find . -maxdepth 1 -type f -size +1M',
          'import os\n\nfor e in os.scandir("."):\n    if e.is_file(follow_symlinks=False) and e.stat().st_size > 1_048_576:\n        print(e.name)'),

    # JSON
    Idiom(Topic.JSON, "Read a nested field",
          'jq -r .service.region config.json',
          'import json\n\nwith open("config.json") as fh:\n    print(json.load(fh)["service"]["region"])'),
    Idiom(Topic.JSON, "Write JSON",
          'jq -n --arg r us-east-1 \'{service: {region: $r}}\' > config.json',
          'import json\n\nwith open("config.json", "w") as fh:\n    json.dump({"service": {"region": "us-east-1"}}, fh)'),
]


def idioms_for(topic: Topic) -> List[Idiom]:
    """All idioms in a topic, in table order."""
    return [idiom for idiom in IDIOMS if idiom.topic is topic]


def render_markdown(idioms: Iterable[Idiom] = None) -> str:
    """Render idioms as Markdown: one section per topic, in Topic order."""
    if idioms is None:
        idioms = IDIOMS
    idioms = list(idioms)

    lines = ["# Bash to Python cheat-sheet", ""]
    for topic in Topic:
        section = [i for i in idioms if i.topic is topic]
        if not section:
            continue
        lines += [f"## {topic.heading}", ""]
        for idiom in section:
            lines += [
                f"### {idiom.title}",
                "",
                "```bash", idiom.bash, "```",
                "",
                "```python", idiom.python, "```",
                "",
            ]
    return "\n".join(lines)
