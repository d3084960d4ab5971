
import importlib
import os

# property files are named after the property, the modules after the property category
property_modules = {
    'unreach-call' : 'ReachSafety',
}

def load_config(name : str):
    name = os.path.basename(name).split('.')[0]
    modname = 'pysvbench.config.' + name
    return importlib.import_module(modname)

def load_specification(name : str):
    name = os.path.basename(name).split('.')[0]
    modname = 'pysvbench.property.' + property_modules.get(name, name)
    return importlib.import_module(modname)
