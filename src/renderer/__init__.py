"""Path tracing integrator, sampling PDFs, tile scheduling and image output."""
