"""Plugin interfaces and storage, plus the standard service, action selector, event generator and room model."""