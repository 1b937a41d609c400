from culture_diffusion.experiments.cli import entrypoint

entrypoint()
