import torch
from PyQt5.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout,
                           QSpinBox, QPushButton,
                           QComboBox, QGroupBox, QFormLayout)
from .constants import (DEFAULT_SIZE, DEFAULT_INTERVAL, DEFAULT_MAX_GENERATIONS,
                      DEFAULT_PATTERN, PATTERNS)
from .model import min_board_size

class SettingsDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Game of Life Settings")
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout()

        # Board Settings
        board_group = QGroupBox("Board Settings")
        board_layout = QFormLayout()

        self.size_spin = QSpinBox()
        self.size_spin.setRange(1, 1000)
        self.size_spin.setValue(DEFAULT_SIZE)
        board_layout.addRow("Board Size:", self.size_spin)

        self.pattern_combo = QComboBox()
        for name in PATTERNS:
            self.pattern_combo.addItem(name.capitalize(), name)
        self.pattern_combo.setCurrentIndex(self.pattern_combo.findData(DEFAULT_PATTERN))
        self.pattern_combo.currentIndexChanged.connect(self.update_size_minimum)
        self.update_size_minimum()
        board_layout.addRow("Seed Pattern:", self.pattern_combo)

        board_group.setLayout(board_layout)
        layout.addWidget(board_group)

        # Animation Settings
        anim_group = QGroupBox("Animation Settings")
        anim_layout = QFormLayout()

        self.interval_spin = QSpinBox()
        self.interval_spin.setRange(10, 5000)
        self.interval_spin.setValue(DEFAULT_INTERVAL)
        self.interval_spin.setSingleStep(10)
        anim_layout.addRow("Update Interval (ms):", self.interval_spin)

        self.generations_spin = QSpinBox()
        self.generations_spin.setRange(1, 100000)
        self.generations_spin.setValue(DEFAULT_MAX_GENERATIONS)
        anim_layout.addRow("Max Generations:", self.generations_spin)

        anim_group.setLayout(anim_layout)
        layout.addWidget(anim_group)

        # Device Settings
        device_group = QGroupBox("Device Settings")
        device_layout = QFormLayout()

        self.device_combo = QComboBox()
        if torch.cuda.is_available():
            self.device_combo.addItem("CPU", "cpu")
            self.device_combo.addItem("CUDA (GPU)", "cuda")
        else:
            self.device_combo.addItem("CPU (CUDA not available)", "cpu")
        device_layout.addRow("Device:", self.device_combo)

        device_group.setLayout(device_layout)
        layout.addWidget(device_group)

        # Buttons
        button_layout = QHBoxLayout()
        self.ok_button = QPushButton("Start Simulation")
        self.cancel_button = QPushButton("Cancel")
        button_layout.addWidget(self.ok_button)
        button_layout.addWidget(self.cancel_button)
        layout.addLayout(button_layout)

        self.setLayout(layout)

        # Connect signals
        self.ok_button.clicked.connect(self.accept)
        self.cancel_button.clicked.connect(self.reject)

    def update_size_minimum(self):
        # The board must hold the whole seed pattern
        pattern = PATTERNS[self.pattern_combo.currentData()]
        self.size_spin.setMinimum(min_board_size(pattern))
