# infofetch

A library for gathering information about the machine it runs on and
turning it into short, human-readable lines: operating system, host model,
kernel, uptime, installed packages, CPU and CPU usage, memory, disks,
batteries, local addresses and locale. It also formats values that the
caller has already found (GPU, desktop environment, window manager,
themes, cursor, shell, terminal, screen resolution, media player and
song, date and time) into the same kind of line.

The readers work on Linux, where the information comes from `/proc`,
`/sys` and the usual configuration files. Readers that take a root
directory or a path can be pointed at a copy of those files, so they can
be used on snapshots of other systems.

## Installation

```
pip install .
```

The only runtime dependency is `psutil`, used for network addresses and
the process count. Install the `test` extra to run the tests with pytest.

## Modules

| Module | What it provides |
| --- | --- |
| `infofetch.os_info` | `OSRelease`, `describe_os` |
| `infofetch.host` | `detect_host(root)`, `build_host`, `is_meaningful`, `clean_value` |
| `infofetch.system` | `kernel_release()`, `process_count()` |
| `infofetch.uptime` | `split_uptime`, `format_uptime` |
| `infofetch.packages` | `PackageCounts`, `detect_packages(root)`, `count_entries`, `count_matching_lines`, `count_files_recursive` |
| `infofetch.cpu` | `CPUInfo`, `detect_cpu(root)`, `parse_cpuinfo`, `prettify_name`, `read_ghz`, `format_cpu` |
| `infofetch.cpu_usage` | `measure_usage(path, interval)`, `parse_stat`, `usage_percent`, `format_usage` |
| `infofetch.memory` | `Memory`, `read_memory(path)`, `parse_meminfo`, `format_memory` |
| `infofetch.disk` | `DiskUsage`, `detect_disks(folders)`, `usage_from_statvfs`, `split_folders`, `disk_key`, `format_disk` |
| `infofetch.battery` | `Battery`, `read_batteries(base_dir)`, `read_battery`, `format_battery` |
| `infofetch.local_ip` | `InterfaceAddress`, `detect_addresses()`, `select_addresses`, `address_key` |
| `infofetch.locale_info` | `detect_locale(conf_path, environ)`, `parse_locale_conf`, `locale_from_env` |
| `infofetch.gpu` | `vendor_pretty`, `name_pretty`, `format_gpu`, `gpu_indices` |
| `infofetch.desktop` | `format_de`, `format_wm` |
| `infofetch.shell` | `format_shell`, `format_terminal` |
| `infofetch.theme` | `plasma_color_pretty`, `format_theme` |
| `infofetch.wmtheme` | `WMThemeSource`, `wm_theme_source`, `strip_plasma_prefixes`, `parse_openbox_theme`, `openbox_config_path`, `combine_muffin` |
| `infofetch.cursor` | `CursorSource`, `cursor_source`, `cursor_from_env`, `prettify_cursor_theme`, `format_cursor` |
| `infofetch.song` | `format_song`, `prettify_song`, `prettify_artist`, `artist_in_title` |
| `infofetch.player` | `format_player`, `site_name` |
| `infofetch.resolution` | `Resolution`, `format_resolution`, `resolution_entries` |
| `infofetch.clock` | `format_date`, `format_time`, `format_datetime` |
| `infofetch.layout` | `title_line`, `separator_line`, `color_blocks` |
| `infofetch.custom` | `Entry`, `ModuleError`, `format_line` |
| `infofetch.strbuf` | text helpers such as `remove_all`, `remove_strings`, `trim`, `substr_after_first` |
| `infofetch.valuestore` | `ValueStore`, a case-insensitive name/value store |

When a piece of information cannot be found, the function raises
`infofetch.custom.ModuleError`; its `module` attribute names the kind of
information and `message` says what was missing. `detect_disks` is the
exception for individual folders: a folder that cannot be examined appears
as a `ModuleError` in the returned list, next to the `Entry` objects of the
others.

## Examples

Reading information from the running system:

```python
from infofetch.cpu import detect_cpu
from infofetch.memory import read_memory, format_memory
from infofetch.uptime import format_uptime

print(detect_cpu("/"))
print(format_memory(read_memory("/proc/meminfo")))
print(format_uptime(93784))   # "1 day, 2 hours, 3 mins"
```

Handling missing information:

```python
from infofetch.custom import ModuleError
from infofetch.battery import read_batteries, format_battery

try:
    for battery in read_batteries("/sys/class/power_supply"):
        print(format_battery(battery))
except ModuleError as error:
    print(error)
```

Disk usage, as key/value entries:

```python
from infofetch.disk import detect_disks

for item in detect_disks():          # "/" and, if separate, the home file system
    print(item)                      # e.g. "Disk (/): 40GB / 100GB (40%)"
```

Formatting values found elsewhere:

```python
from infofetch.gpu import format_gpu
from infofetch.resolution import Resolution, resolution_entries

format_gpu("NVIDIA Corporation", "GA104 [GeForce RTX 3070]")   # "Nvidia GeForce RTX 3070"
[str(e) for e in resolution_entries([Resolution(1920, 1080, 60)])]
# ["Resolution: 1920x1080 @ 60Hz"]
```

The text helpers and the value store:

```python
from infofetch.strbuf import remove_all, remove_strings
from infofetch.valuestore import ValueStore

remove_all("123456789", "78")                    # "1234569"
remove_strings("1234569", ["23", "45", "9"])     # "16"

store = ValueStore()
store.set("Logo", "arch")
store.get("logo")        # "arch"
"LOGO" in store          # True
```

## What it does not do

- There is no command-line program. The package is a library; putting the
  lines together and printing them is left to the caller.
- There is no logo art, no configuration file, no custom format strings and
  no caching of results between runs.
- The GPU, display resolution, desktop environment, window manager, theme,
  icon, font, cursor, shell, terminal and media player values are not
  detected. The modules for them only decide where such a value would be
  found (`wm_theme_source`, `cursor_source`, `cursor_from_env`,
  `parse_openbox_theme`) and format values the caller supplies.
- The public IP address is not looked up.