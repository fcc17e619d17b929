pytest_plugins = ["tensorparam.pytest_plugin"]
