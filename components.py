# components.py
import tkinter as tk

def create_buffer_frame(parent, title, color):
    """Chip buffer panel. The returned count label shows how many chips wait."""
    frame = tk.Frame(parent, bg="white", bd=1, relief="solid")
    frame.pack(fill="both", expand=True, padx=5)

    header = tk.Frame(frame, bg=color)
    header.pack(fill="x")
    tk.Label(header, text=title, bg=color, fg="white", font=("Segoe UI", 10, "bold"), pady=5).pack(side="left", padx=5)
    count = tk.Label(header, text="0 queued", bg=color, fg="white", font=("Arial", 9))
    count.pack(side="right", padx=5)

    content = tk.Frame(frame, bg="white")
    content.pack(fill="both", expand=True, padx=5, pady=5)
    return content, count

def create_station_frame(parent, title):
    """Creates a frame for the Producer or Consumer station"""
    container = tk.Frame(parent, bg="white", bd=1, relief="sunken", padx=5, pady=5)
    container.pack(fill="x", pady=5)

    tk.Label(container, text=title, font=("Courier", 10, "bold"), fg="#312E81", bg="white").pack(anchor="w")
    status = tk.Label(container, text="IDLE", font=("Arial", 9), fg="gray", bg="white")
    status.pack(anchor="w")
    return container, status

def draw_chip_card(parent, chip):
    """Draws a single queued chip"""
    frame = tk.Frame(parent, bg="white", bd=1, relief="raised", padx=5, pady=5)
    frame.pack(fill="x", pady=2)

    h_frame = tk.Frame(frame, bg="white")
    h_frame.pack(fill="x")
    tk.Label(h_frame, text=f"C{chip.chip_id}", font=("Arial", 10, "bold"), fg=chip.color, bg="white").pack(side="left")
    tk.Label(h_frame, text=chip.chip_type.name, font=("Arial", 8), fg="gray", bg="white").pack(side="right")

    # Cost bar, full width for the biggest tier
    canvas = tk.Canvas(frame, height=5, bg="#E2E8F0", highlightthickness=0)
    canvas.pack(fill="x", pady=3)
    canvas.create_rectangle(0, 0, 50 * chip.cost, 5, fill=chip.color, width=0)
