import os
import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import threading
from typing import List, Optional

from ..core.filters import FilterType
from ..core.io_utils import gather_inputs, list_images
from ..core.models import ResizeSettings
from ..core.resize_service import resize_many
from ..core.wand import terminate

FILTER_NAMES = [n.lower() for n in FilterType.__members__]

class ImageResizerGUI:
    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title("Image Resizer")
        self.root.geometry("760x480")

        # UI state
        self.files: List[str] = []
        self.folder: Optional[str] = None
        self.output_folder: Optional[str] = None

        self.width_val = tk.IntVar(value=0)  # 0 on both = keep source size
        self.height_val = tk.IntVar(value=0)
        self.quality = tk.IntVar(value=85)
        self.filter_name = tk.StringVar(value="lanczos")

        self.status = tk.StringVar(value="Select files or a folder to begin")
        self._busy = False
        self.worker: Optional[threading.Thread] = None
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)
        self._build_ui()

    # ---------- UI ----------
    def _build_ui(self):
        top = tk.Frame(self.root); top.pack(fill="x", padx=10, pady=(10,6))
        tk.Label(top, text="Input:").pack(side="left")
        tk.Button(top, text="Choose Files", command=self.choose_files).pack(side="left", padx=5)
        tk.Button(top, text="Choose Folder", command=self.choose_folder).pack(side="left", padx=5)
        self.input_label = tk.Label(top, text="No files selected", anchor="w"); self.input_label.pack(side="left", padx=10)

        out = tk.Frame(self.root); out.pack(fill="x", padx=10, pady=(0,8))
        tk.Label(out, text="Output folder:").pack(side="left")
        tk.Button(out, text="Select", command=self.choose_output).pack(side="left", padx=5)
        self.output_label = tk.Label(out, text="default: next to each source image", anchor="w"); self.output_label.pack(side="left", padx=10)

        opts = tk.LabelFrame(self.root, text="Resize Options"); opts.pack(fill="x", padx=10, pady=10)
        row = tk.Frame(opts); row.pack(fill="x", pady=4)
        tk.Label(row, text="Width:").pack(side="left")
        tk.Entry(row, textvariable=self.width_val, width=6).pack(side="left", padx=(4,10))
        tk.Label(row, text="Height:").pack(side="left")
        tk.Entry(row, textvariable=self.height_val, width=6).pack(side="left", padx=(4,10))
        tk.Label(row, text="Filter:").pack(side="left", padx=(10,0))
        ttk.Combobox(row, textvariable=self.filter_name, values=FILTER_NAMES, state="readonly", width=10).pack(side="left", padx=(6,10))

        row2 = tk.Frame(opts); row2.pack(fill="x", pady=4)
        tk.Label(row2, text="Quality:").pack(side="left")
        self.q_scale = ttk.Scale(row2, from_=1, to=100, orient="horizontal", command=self._sync_quality_label)
        self.q_scale.set(self.quality.get()); self.q_scale.pack(side="left", fill="x", expand=True, padx=(6,6))
        self.q_label = tk.Label(row2, text=str(self.quality.get())); self.q_label.pack(side="left")

        actions = tk.Frame(self.root); actions.pack(fill="x", padx=10, pady=(4,6))
        tk.Button(actions, text="Resize Images", command=self.run).pack(side="left")

        self.progress = ttk.Progressbar(self.root, mode="determinate"); self.progress.pack(fill="x", padx=10, pady=(2,4))
        tk.Label(self.root, textvariable=self.status, anchor="w").pack(fill="x", padx=10)
        self.log_box = tk.Text(self.root, height=12, wrap="none"); self.log_box.pack(fill="both", expand=True, padx=10, pady=(4,10))

    def _sync_quality_label(self, _evt=None):
        self.quality.set(int(float(self.q_scale.get())))
        self.q_label.config(text=str(self.quality.get()))

    # ---------- inputs ----------
    def choose_files(self):
        paths = filedialog.askopenfilenames(
            title="Select image files",
            filetypes=[("Images", "*.jpg;*.jpeg;*.png;*.webp;*.bmp;*.tiff"), ("All files", "*.*")]
        )
        if paths:
            self.files = list(paths); self.folder = None
            self.input_label.config(text=f"{len(self.files)} files selected")

    def choose_folder(self):
        folder = filedialog.askdirectory(title="Select folder containing images")
        if folder:
            self.folder = folder; self.files = []
            self.input_label.config(text=f"Folder selected ({len(list_images(folder))} images)")

    def choose_output(self):
        folder = filedialog.askdirectory(title="Select output folder")
        if folder:
            self.output_folder = folder
            self.output_label.config(text=folder)

    # ---------- actions ----------
    def run(self):
        if self._busy:
            return
        files = gather_inputs(self.files, self.folder)
        if not files:
            messagebox.showwarning("No images", "Please select files or a folder with images")
            return

        w, h = _safe_int(self.width_val), _safe_int(self.height_val)
        if not w and not h:
            w = h = None
        settings = ResizeSettings(
            width=w,
            height=h,
            compression_quality=int(self.quality.get()),
            filter_type=FilterType.from_name(self.filter_name.get()),
            output_dir=self.output_folder or "",
        )

        self._busy = True
        self.progress.configure(value=0, maximum=len(files))
        self.worker = threading.Thread(target=self._worker, args=(files, settings), daemon=True)
        self.worker.start()

    def _worker(self, files: List[str], settings: ResizeSettings):
        ok = err = 0

        def on_progress(done: int, total: int):
            self.progress.configure(value=done)
            self.root.update_idletasks()

        try:
            for res in resize_many(files, settings, progress=on_progress, log=self._append):
                if res.ok:
                    ok += 1
                    self._append(f"{os.path.basename(res.src_path)} {res.in_size} -> {res.out_size}: {res.dst_path}")
                else:
                    err += 1
        except OSError as e:
            self.status.set(f"Failed: {e}")
            self._append(f"[Error] {e}")
            return
        finally:
            self._busy = False

        self.status.set(f"Done. Success: {ok}, Errors: {err}.")
        self._append(f"\nFinished.\nSuccess: {ok}\nErrors: {err}")

    def on_close(self):
        if self._busy:
            self.status.set("Wait for the current batch to finish before closing")
            return
        self.root.destroy()

    def _append(self, text: str):
        self.log_box.insert(tk.END, text + "\n"); self.log_box.see(tk.END)


def _safe_int(var: tk.IntVar):
    try:
        return int(var.get())
    except (tk.TclError, ValueError):
        return None


def shutdown(worker: Optional[threading.Thread]) -> None:
    """Wait for a running batch to release its wands, then tear down the environment."""
    if worker is not None and worker.is_alive():
        worker.join()
    terminate()


def main():
    root = tk.Tk()
    gui = ImageResizerGUI(root)
    try:
        root.mainloop()
    finally:
        shutdown(gui.worker)


if __name__ == "__main__":
    main()
