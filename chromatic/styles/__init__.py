"""Ready-made colour schemes and the registry that looks them up by name."""