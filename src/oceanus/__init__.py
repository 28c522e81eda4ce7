"""Oceanus.

Fields are stored with their halos, (Nx+2Hx, Ny+2Hy, Nz+2Hz)-shaped, and
kernels return interior tensors, (Nx, Ny, Nz)-shaped.
    - Nx: number of cells in the x (eastward) direction
    - Ny: number of cells in the y (northward) direction
    - Nz: number of cells in the z (upward) direction
"""

import torch
from dotenv import load_dotenv

from oceanus.logging import setup_root_logger

# Load Environment variables
load_dotenv()
# Set the seed for reproducibility
torch.random.manual_seed(0)
# Logging
setup_root_logger(1)
