"""WeatherApp: a Tkinter weather lookup page built as MVVM + ports/adapters."""

__version__ = "0.1.0"
