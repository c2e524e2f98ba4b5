#!/usr/bin/env python3
"""
gui.py — Weather Dashboard window

- Search by city name (button or Return)
- "Use My Location" (asks first, then looks up coordinates from the IP address)
- Recent locations dropdown, persisted between runs
- Current conditions card with icon, background theme by condition
- Daily forecast cards (noon entries) + embedded matplotlib temperature chart
- °C / °F toggle for the current temperature
- Network calls on background threads so the UI stays responsive
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, List, Optional, Tuple

import tkinter as tk
from tkinter import ttk, messagebox
from PIL import Image, ImageTk
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

import weather_config as config
from dashboard import DashboardController, DisplaySurface, FetchResult
from dashboard_view import THEMES, DashboardView
from log_util import app_logger, setup_logging
from recent_locations import RecentLocationStore
from unit_toggle import TO_FAHRENHEIT_LABEL
from weather_fetcher import WeatherError

logger = app_logger(__name__)

MAX_CONTENT_WIDTH = 920
HEAT_ALERT_MESSAGE = "⚠️ Extreme Heat Alert!"


def load_icon(path: str, size: int = 96) -> Optional[ImageTk.PhotoImage]:
    """Load a local icon file; None if it is missing or unreadable."""
    if not os.path.exists(path):
        logger.debug(f"Icon not found: {path}")
        return None
    try:
        img = Image.open(path).resize((size, size), Image.LANCZOS)
        return ImageTk.PhotoImage(img)
    except OSError as e:
        logger.warning(f"Could not load icon {path}: {e}")
        return None


# ----------------- Main App -----------------
class WeatherApp(tk.Tk, DisplaySurface):
    def __init__(self, store: Optional[RecentLocationStore] = None):
        super().__init__()
        self.title("Weather Dashboard")
        self.geometry("1000x760")
        self.minsize(860, 620)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.colors = THEMES["sunny"]
        self.recent_values: List[str] = []

        self._build_ui()

        # center behavior & scrolling
        self.canvas.bind("<Configure>", self._on_canvas_configure)
        self.content.bind("<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self._bind_mousewheel()

        self.controller = DashboardController(self, store or RecentLocationStore())
        self.controller.start()

    # ---------- UI builders ----------
    def _build_ui(self):
        outer = ttk.Frame(self)
        outer.pack(fill="both", expand=True)

        self.canvas = tk.Canvas(outer, bg=self.colors["bg"], highlightthickness=0)
        self.vscroll = ttk.Scrollbar(outer, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.vscroll.set)

        self.canvas.pack(side="left", fill="both", expand=True)
        self.vscroll.pack(side="right", fill="y")

        self.content = tk.Frame(self.canvas, bg=self.colors["bg"])
        self.win = self.canvas.create_window(0, 0, window=self.content, anchor="n")

        # header
        self.header = tk.Frame(self.content, bg=self.colors["accent"])
        self.header.pack(fill="x")
        self.header_label = tk.Label(self.header, text="Weather Dashboard", bg=self.colors["accent"], fg="white",
                                     font=("Segoe UI", 18, "bold"), pady=10)
        self.header_label.pack()

        # controls
        self.controls = tk.Frame(self.content, bg=self.colors["bg"])
        self.controls.pack(pady=12, fill="x")

        self.city_var = tk.StringVar()
        self.city_entry = ttk.Entry(self.controls, textvariable=self.city_var, width=36, font=("Segoe UI", 11))
        self.city_entry.grid(row=0, column=0, padx=(8, 6))
        self.city_entry.bind("<Return>", lambda e: self.search())

        self.search_btn = ttk.Button(self.controls, text="Search", command=self.search)
        self.search_btn.grid(row=0, column=1, padx=4)
        self.location_btn = ttk.Button(self.controls, text="Use My Location", command=self.use_my_location)
        self.location_btn.grid(row=0, column=2, padx=4)

        ttk.Label(self.controls, text="Recent:").grid(row=1, column=0, pady=(8, 0), sticky="w", padx=8)
        self.recent_var = tk.StringVar()
        self.recent_cb = ttk.Combobox(self.controls, textvariable=self.recent_var, width=30, state="readonly")
        self.recent_cb.grid(row=1, column=1, columnspan=2, pady=(8, 0), sticky="w")
        self.recent_cb.bind("<<ComboboxSelected>>", lambda e: self._on_recent_selected())

        self.unit_btn = ttk.Button(self.controls, text=TO_FAHRENHEIT_LABEL, command=self.toggle_unit)
        self.unit_btn.grid(row=0, column=3, padx=12)

        # current card
        self.card = tk.Frame(self.content, bg=self.colors["card"])
        self.card.pack(padx=16, pady=12, fill="x")

        self.city_label = tk.Label(self.card, text="—", font=("Segoe UI", 16, "bold"))
        self.city_label.grid(row=0, column=0, columnspan=2, sticky="w", padx=12, pady=(10, 0))
        self.date_label = tk.Label(self.card, text="", font=("Segoe UI", 10))
        self.date_label.grid(row=1, column=0, columnspan=2, sticky="w", padx=12, pady=(0, 6))

        self.icon_label = tk.Label(self.card)
        self.icon_label.grid(row=2, column=0, rowspan=4, padx=12, pady=8)

        self.desc_label = tk.Label(self.card, text="—", font=("Segoe UI", 12))
        self.desc_label.grid(row=2, column=1, sticky="w")
        self.temp_label = tk.Label(self.card, text="Temp: —", font=("Segoe UI", 12))
        self.temp_label.grid(row=3, column=1, sticky="w", pady=2)
        self.wind_label = tk.Label(self.card, text="Wind: —", font=("Segoe UI", 12))
        self.wind_label.grid(row=4, column=1, sticky="w")
        self.hum_label = tk.Label(self.card, text="Humidity: —", font=("Segoe UI", 12))
        self.hum_label.grid(row=5, column=1, sticky="w", pady=(0, 12))

        # forecast
        self.forecast_card = tk.Frame(self.content, bg=self.colors["card"])
        self.forecast_card.pack(padx=16, pady=(6, 18), fill="x")

        self.forecast_title = tk.Label(self.forecast_card, text="Daily Forecast", font=("Segoe UI", 13, "bold"))
        self.forecast_title.pack(anchor="w", padx=12, pady=(10, 4))

        self.day_panels = tk.Frame(self.forecast_card)
        self.day_panels.pack(fill="x", padx=12)

        # graph
        self.graph_container = tk.Frame(self.content, bg=self.colors["card"])
        self.graph_container.pack(padx=16, pady=(8, 20), fill="x")

        self.status = tk.Label(self.content, text="Ready")
        self.status.pack(pady=(6, 12))

        self._paint_theme()

    # ---------- theme helpers ----------
    def _paint_theme(self):
        c = self.colors
        self.canvas.configure(bg=c["bg"])
        self.content.configure(bg=c["bg"])
        self.controls.configure(bg=c["bg"])
        self.header.configure(bg=c["accent"])
        self.header_label.configure(bg=c["accent"])
        for frame in (self.card, self.forecast_card, self.day_panels, self.graph_container):
            frame.configure(bg=c["card"])
        for label in (self.city_label, self.date_label, self.desc_label, self.temp_label,
                      self.wind_label, self.hum_label, self.forecast_title):
            label.configure(bg=c["card"], fg=c["fg"])
        self.icon_label.configure(bg=c["card"])
        self.status.configure(bg=c["bg"], fg=c["fg"])

    # ---------- scroll bindings ----------
    def _bind_mousewheel(self):
        # Windows/mac
        self.canvas.bind_all("<MouseWheel>", self._on_mousewheel_windows_mac)
        # Linux
        self.canvas.bind_all("<Button-4>", self._on_mousewheel_linux)
        self.canvas.bind_all("<Button-5>", self._on_mousewheel_linux)

    def _on_mousewheel_windows_mac(self, event):
        delta = -1 if event.delta > 0 else 1
        self.canvas.yview_scroll(delta, "units")

    def _on_mousewheel_linux(self, event):
        if event.num == 4:
            self.canvas.yview_scroll(-1, "units")
        elif event.num == 5:
            self.canvas.yview_scroll(1, "units")

    def _on_canvas_configure(self, event):
        w = min(event.width, MAX_CONTENT_WIDTH)
        self.canvas.itemconfig(self.win, width=w)
        self.canvas.coords(self.win, event.width / 2, 0)

    # ---------- actions ----------
    def search(self):
        self._lookup_async(self.controller.lookup_city, self.city_var.get())

    def _on_recent_selected(self):
        idx = self.recent_cb.current()
        if idx >= 0:
            self._lookup_async(self.controller.lookup_recent, self.recent_values[idx])

    def use_my_location(self):
        allowed = messagebox.askyesno("Location Access", "Show weather for your current location (detected from IP)?")
        self._lookup_async(self.controller.lookup_current_location, allowed)

    def toggle_unit(self):
        self.controller.toggle_unit()

    # ---------------- threading + fetching ----------------
    def _lookup_async(self, lookup: Callable[..., Optional[FetchResult]], *args):
        self.status.configure(text="Fetching...")
        threading.Thread(target=self._lookup_thread, args=(lookup,) + args, daemon=True).start()

    def _lookup_thread(self, lookup, *args):
        try:
            result = lookup(*args)
        except Exception as e:
            logger.exception(f"Lookup crashed: {e}")
            result = FetchResult(error=WeatherError(str(e) or "Error fetching weather"))
        self.after(0, lambda: self._show_result(result))

    def _show_result(self, result: Optional[FetchResult]):
        if result is None:
            self.status.configure(text="Ready")
            return
        if not result.ok:
            messagebox.showerror("Error", str(result.error))
            self.status.configure(text="Error")
            return
        self.controller.apply(result)
        if result.view.heat_alert:
            messagebox.showwarning("Heat alert", HEAT_ALERT_MESSAGE)

    # ---------------- DisplaySurface ----------------
    def render(self, view: DashboardView) -> None:
        self.colors = view.colors
        self._paint_theme()

        self.city_label.config(text=view.city)
        self.date_label.config(text=view.date)
        self.temp_label.config(text=view.temperature)
        self.wind_label.config(text=view.wind)
        self.hum_label.config(text=view.humidity)
        self.desc_label.config(text=view.description)

        icon_img = load_icon(view.icon, size=96)
        self.icon_label.configure(image=icon_img or "")
        self.icon_label.image = icon_img

        # cards are rebuilt from scratch on every render
        for ch in self.day_panels.winfo_children():
            ch.destroy()
        for card in view.cards:
            frame = tk.Frame(self.day_panels, bg=self.colors["card"], bd=1, relief="solid")
            frame.pack(side="left", padx=8, pady=6)
            tk.Label(frame, text=card.date, bg=self.colors["card"], fg=self.colors["fg"],
                     font=("Segoe UI", 9, "bold")).pack(padx=6, pady=(4, 0))
            icon_small = load_icon(card.icon, size=48)
            if icon_small:
                lbl_img = tk.Label(frame, image=icon_small, bg=self.colors["card"])
                lbl_img.image = icon_small
                lbl_img.pack()
            for text in (card.temperature, card.wind, card.humidity):
                tk.Label(frame, text=text, bg=self.colors["card"], fg=self.colors["fg"],
                         font=("Segoe UI", 8)).pack(padx=6)

        self._draw_chart(view)
        self.status.config(text=f"Showing {view.city}")

    def _draw_chart(self, view: DashboardView):
        for ch in self.graph_container.winfo_children():
            ch.destroy()
        points = [(c.date, c.temp_value) for c in view.cards if c.temp_value is not None]
        if not points:
            return
        fig, ax = plt.subplots(figsize=(7.2, 2.6), dpi=100)
        ax.plot([p[0] for p in points], [p[1] for p in points], marker="o", linewidth=2,
                color=self.colors["accent"])
        ax.set_ylabel("Temp (°C)")
        ax.set_title("Daily temperature at noon")
        ax.tick_params(axis="x", rotation=30)
        fig.tight_layout()
        canvas = FigureCanvasTkAgg(fig, master=self.graph_container)
        canvas.draw()
        canvas.get_tk_widget().pack(fill="x")
        plt.close(fig)

    def set_recent_options(self, options: List[Tuple[str, str]]) -> None:
        self.recent_values = [value for value, _ in options]
        self.recent_cb["values"] = [label for _, label in options]
        if options:
            self.recent_cb.current(0)

    def get_temperature_text(self) -> str:
        return self.temp_label.cget("text")

    def set_temperature_text(self, text: str, toggle_label: str) -> None:
        self.temp_label.config(text=text)
        self.unit_btn.configure(text=toggle_label)

    # ---------------- exit ----------------
    def _on_close(self):
        try:
            self.destroy()
        finally:
            sys.exit(0)


def main():
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    app = WeatherApp()
    app.mainloop()


# ---------------- run ----------------
if __name__ == "__main__":
    main()
