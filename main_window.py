# main_window.py
import tkinter as tk
from tkinter import ttk

from chip_model import ChipInvariantError
from components import create_buffer_frame, create_station_frame, draw_chip_card
from scheduler import ProductionLine

REFRESH_MS = 200

class MainWindow:
    def __init__(self, root, config=None):
        self.root = root
        self.root.title("Chip Line Simulator")
        self.root.geometry("900x600")
        self.root.configure(bg="#F8FAFC")

        # Connect to Logic Engine
        self.line = ProductionLine(config)
        self._setup_ui()
        self.update_ui()

    def _setup_ui(self):
        style = ttk.Style()
        style.theme_use('clam')
        style.configure("TFrame", background="#F8FAFC")
        style.configure("Header.TLabel", font=("Segoe UI", 16, "bold"), foreground="#312E81")

        # --- TOP HEADER ---
        header_frame = ttk.Frame(self.root)
        header_frame.pack(side="top", fill="x", padx=15, pady=15)
        ttk.Label(header_frame, text="Chip Line", style="Header.TLabel").pack(side="left")

        self.btn_run = tk.Button(header_frame, text="Run", bg="#22C55E", fg="white", font=("Segoe UI", 10, "bold"), command=self.start_line)
        self.btn_run.pack(side="left", padx=20)

        self.btn_stop = tk.Button(header_frame, text="Stop", bg="#EF4444", fg="white", font=("Segoe UI", 10, "bold"), command=self.line.cancel)
        self.btn_stop.pack(side="left")

        btn_reset = tk.Button(header_frame, text="Reset", bg="#94A3B8", fg="white", font=("Segoe UI", 10, "bold"), command=self.reset_line)
        btn_reset.pack(side="left", padx=10)

        # --- MAIN GRID ---
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill="both", expand=True, padx=15, pady=5)

        # 1. LEFT PANEL (Stations)
        left_panel = tk.Frame(main_frame, bg="white", padx=10, pady=10)
        left_panel.grid(row=0, column=0, sticky="nsew", padx=5)
        _, self.lbl_producer = create_station_frame(left_panel, "Producer")
        _, self.lbl_consumer = create_station_frame(left_panel, "Consumer")
        self.lbl_time = tk.Label(left_panel, text="Time: 0.0s", font=("Courier", 14, "bold"), bg="white", fg="#312E81")
        self.lbl_time.pack(anchor="w", pady=10)
        self.lbl_counts = tk.Label(left_panel, text="", font=("Courier", 9), bg="white", justify="left")
        self.lbl_counts.pack(anchor="w")

        # 2. CENTER PANEL (Buffer)
        center_panel = ttk.Frame(main_frame)
        center_panel.grid(row=0, column=1, sticky="nsew", padx=15)
        self.queue_frame, self.lbl_queued = create_buffer_frame(center_panel, "Chip Buffer", "#22C55E")

        # 3. RIGHT PANEL (Logs)
        right_panel = ttk.Frame(main_frame)
        right_panel.grid(row=0, column=2, sticky="nsew", padx=5)
        self.log_list = tk.Listbox(right_panel, bg="#1E293B", fg="#CBD5E1", font=("Courier", 8), height=30, width=50)
        self.log_list.pack(fill="both", expand=True)

        main_frame.columnconfigure(1, weight=1)
        main_frame.columnconfigure(2, weight=2)

    # --- INTERACTION ---
    def start_line(self):
        if self.line.is_running():
            return
        try:
            self.line.reset()
            self.line.start()
        except RuntimeError as e:
            print(f"Error starting line: {e}")
            return
        self.btn_run.config(state="disabled")
        self.run_loop()

    def reset_line(self):
        if self.line.is_running():
            try:
                self.line.stop()
            except ChipInvariantError as e:
                print(f"Line stopped on fatal error: {e}")
        self.line.reset()
        self.btn_run.config(state="normal")
        self.update_ui()

    def run_loop(self):
        self.update_ui()
        if self.line.is_running():
            self.root.after(REFRESH_MS, self.run_loop)
            return
        self.btn_run.config(state="normal")
        if self.line.producer.error is not None:
            self.log_list.insert(0, f"FATAL: {self.line.producer.error}")

    # --- UI UPDATES ---
    def update_ui(self):
        stats = self.line.stats()
        self.lbl_time.config(text=f"Time: {self.line.elapsed():.1f}s")
        self.lbl_producer.config(text=f"{stats['producer_state']} ({stats['produced']}/{self.line.config.emissions})")
        self.lbl_consumer.config(text="FINISHED" if stats["consumer_done"] else f"{stats['processed']} soldered")
        self.lbl_counts.config(text=f"Queued: {stats['queued']}\nIdle wake-ups: {stats['idle_wakeups']}")

        self.log_list.delete(0, tk.END)
        for log in list(self.line.logs):
            self.log_list.insert(tk.END, log)

        self.lbl_queued.config(text=f"{stats['queued']} queued")
        for widget in self.queue_frame.winfo_children(): widget.destroy()
        for chip in self.line.snapshot():
            draw_chip_card(self.queue_frame, chip)
