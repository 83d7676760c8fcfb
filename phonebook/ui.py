"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (entry form, Treeview list, sort selector, logs).
- Inputs: PhoneBook (owned by the caller), notify callback for desktop notifications.
- Outputs: None (renders UI, forwards user actions to the PhoneBook).
- Side effects: Creates windows; shows message boxes; attaches a logging handler.
- Thread-safety: UI code runs on main thread; log records from other threads are posted via after().
"""

import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Callable

from .repository import PhoneBook
from .errors import EntryIndexError, ValidationError
from .config import WINDOW_TITLE, SORT_FIELDS, LOG_MAX_LINES, LOG_FORMAT, LOG_DATEFMT
from .utils import format_entry


class LogPanelHandler(logging.Handler):
    """Forward formatted log records to a callable (the Logs panel appender)."""

    def __init__(self, append: Callable[[str], None]) -> None:
        super().__init__()
        self.append = append
        self.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.append(self.format(record) + "\n")
        except Exception:
            self.handleError(record)


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles desktop notifications
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
        first_name / last_name / phone_number (tk.StringVar): form fields
        sort_field (tk.StringVar): selected sort label (key of SORT_FIELDS)
    - Public methods:
        refresh_ui(): rebuild the list from the PhoneBook (called after every mutation)
    """

    def __init__(self, root: tk.Tk, book: PhoneBook, notify: Callable[[str, str], None]):
        self.root = root
        self.book = book
        self.notify = notify

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=True)
        self.show_logs = tk.BooleanVar(value=False)
        self.first_name = tk.StringVar()
        self.last_name = tk.StringVar()
        self.phone_number = tk.StringVar()
        self.sort_field = tk.StringVar(value=next(iter(SORT_FIELDS)))

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg="#1e1e1e")

        # Paned window: top = content (form, tree, buttons), bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew", padx=0, pady=0)

        content_frame = tk.Frame(self.paned, bg="#1e1e1e")
        content_frame.rowconfigure(1, weight=1)
        content_frame.columnconfigure(0, weight=1)
        self.paned.add(content_frame, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg="#1e1e1e")
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
        self.logs_box.pack_forget()  # hidden by default
        self.paned.add(self.bottom_frame, weight=0)

        def _keep_sash_collapsed(_event=None):
            """When Logs is unchecked, keep sash at bottom so window can resize down."""
            if not self.show_logs.get():
                self.paned.update_idletasks()
                total = self.paned.winfo_height()
                if total > 0:
                    self.paned.sashpos(0, total)

        self.paned.bind("<Configure>", _keep_sash_collapsed)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background="#2b2b2b",
            foreground="#f0f0f0",
            fieldbackground="#2b2b2b",
            rowheight=24,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background="#1e1e1e",
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#444')], foreground=[])

        # Entry form
        form = tk.Frame(content_frame, bg="#1e1e1e")
        form.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        fields = (("First Name", self.first_name), ("Last Name", self.last_name), ("Phone Number", self.phone_number))
        for col, (label, var) in enumerate(fields):
            tk.Label(form, text=label, fg="white", bg="#1e1e1e").grid(row=0, column=col, sticky="w", padx=5)
            tk.Entry(form, textvariable=var).grid(row=1, column=col, padx=5, pady=(0, 5))
        tk.Label(form, text="XXX-XXX-XXXX", fg="gray", bg="#1e1e1e", font=("Segoe UI", 8)).grid(row=2, column=2, sticky="w", padx=5)
        self.submit_button = ttk.Button(form, text="Add Entry", command=self.submit)
        self.submit_button.grid(row=1, column=3, padx=5, pady=(0, 5))

        # Treeview (row order == PhoneBook order, so the row index is the entry index)
        self.columns = ("first_name", "last_name", "phone_number")
        self.tree = ttk.Treeview(content_frame, columns=self.columns, show="headings", selectmode="browse")
        self.tree.grid(row=1, column=0, sticky="nsew", padx=10, pady=5)

        for label, col in SORT_FIELDS.items():
            self.tree.heading(col, text=label, command=lambda l=label: self.sort_by_label(l))

        self.tree.bind("<Double-1>", self.on_double_click)

        # Buttons & toggles
        button_frame = tk.Frame(content_frame, bg="#1e1e1e")
        button_frame.grid(row=4, column=0, sticky="ew", padx=10, pady=(0, 10))

        ttk.Button(button_frame, text="Edit", command=self.edit_entry).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete", command=self.delete_entry).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete All", command=self.delete_all).pack(side=tk.LEFT, padx=5)

        ttk.Combobox(
            button_frame,
            textvariable=self.sort_field,
            values=list(SORT_FIELDS),
            state="readonly",
            width=14,
        ).pack(side=tk.LEFT, padx=(15, 5))
        ttk.Button(button_frame, text="Sort", command=self.sort_entries).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            activebackground="#1e1e1e",
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Mirror package log records into the Logs panel
        self.log_handler = LogPanelHandler(lambda line: self.root.after(0, lambda: self._append_log(line)))
        logging.getLogger("phonebook").addHandler(self.log_handler)
        self.root.bind("<Destroy>", self._on_destroy, add="+")

        # Initial paint
        self.refresh_ui()

    # ---------- UI callbacks & utilities ----------

    def toggle_logs(self) -> None:
        """Show/hide logs in bottom pane by resizing it."""
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, int(total * 0.8))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, total)

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the PhoneBook snapshot.
        Side effects: Mutates Treeview items and the submit button label (UI only).
        """
        self.tree.delete(*self.tree.get_children())
        for index, entry in enumerate(self.book.snapshot()):
            self.tree.insert(
                "", "end", iid=str(index),
                values=(entry.first_name, entry.last_name, entry.phone_number),
            )
        self.submit_button.configure(text="Update Entry" if self.book.is_editing else "Add Entry")

    def selected_index(self) -> int | None:
        selected = self.tree.selection()
        if not selected:
            return None
        return int(selected[0])

    def clear_form(self) -> None:
        self.first_name.set("")
        self.last_name.set("")
        self.phone_number.set("")

    def on_double_click(self, event) -> None:
        """Double-clicking a row starts editing it."""
        if self.tree.identify_row(event.y):
            self.edit_entry()

    # ---------- Actions forwarded to the PhoneBook ----------

    def submit(self) -> None:
        """
        Purpose: Add the form contents as a new entry, or replace the entry being edited.
        Side effects: Mutates PhoneBook; clears the form on success; blocking error dialog on failure.
        """
        updating = self.book.is_editing
        try:
            entry = self.book.add_or_update(
                self.first_name.get().strip(),
                self.last_name.get().strip(),
                self.phone_number.get().strip(),
            )
        except ValidationError as exc:
            messagebox.showerror("Invalid Phone Number", exc.message)
            return
        self.clear_form()
        self.refresh_ui()
        if self.enable_notifications.get():
            action = "Updated" if updating else "Added"
            self.notify("Phone Book", f"{action} {format_entry(entry)}")

    def edit_entry(self) -> None:
        """
        Purpose: Load the selected entry into the form; the next submit replaces it.
        """
        index = self.selected_index()
        if index is None:
            messagebox.showinfo("Edit Entry", "Select an entry to edit.")
            return
        try:
            entry = self.book.begin_edit(index)
        except EntryIndexError as exc:
            messagebox.showerror("Edit Entry", str(exc))
            self.refresh_ui()
            return
        self.first_name.set(entry.first_name)
        self.last_name.set(entry.last_name)
        self.phone_number.set(entry.phone_number)
        self.submit_button.configure(text="Update Entry")

    def delete_entry(self) -> None:
        """
        Purpose: Remove the selected entry.
        Side effects: Mutates PhoneBook; a pending edit is dropped, so the form is cleared too.
        """
        index = self.selected_index()
        if index is None:
            messagebox.showinfo("Delete Entry", "Select an entry to delete.")
            return
        was_editing = self.book.is_editing
        try:
            removed = self.book.delete(index)
        except EntryIndexError as exc:
            messagebox.showerror("Delete Entry", str(exc))
            self.refresh_ui()
            return
        if was_editing:
            self.clear_form()
        self.refresh_ui()
        if self.enable_notifications.get():
            self.notify("Phone Book", f"Deleted {format_entry(removed)}")

    def delete_all(self) -> None:
        """
        Purpose: Remove all entries after user confirmation.
        """
        if not len(self.book):
            return
        if not messagebox.askyesno("Delete All", "Remove all entries from the phone book? This cannot be undone."):
            return
        self.book.clear_all()
        self.clear_form()
        self.refresh_ui()

    def sort_entries(self) -> None:
        self.sort_by_label(self.sort_field.get())

    def sort_by_label(self, label: str) -> None:
        """
        Purpose: Sort by the field behind a selector/header label and refresh.
        Inputs: label (key of SORT_FIELDS).
        """
        self.sort_field.set(label)
        if self.book.is_editing:
            self.clear_form()
        self.book.sort_by(SORT_FIELDS[label])
        self.refresh_ui()

    # ---------- internal helpers for Logs ----------

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")

    def _on_destroy(self, event) -> None:
        if event.widget is self.root:
            logging.getLogger("phonebook").removeHandler(self.log_handler)
