import inspect
import logging


def get_root_from_chunk(instance):
    while instance.father is not None:
        instance = instance.father

    return instance


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the (internal) length of the string contained in the field named 'data'
    strictly connected to the field named 'length'.

    The syntax for defining the expression is inspired from module resolution:

     - a leading '.' indicates we refer to a field at the same level (i.e. a
       sibling, resolved from the father)
     - otherwise the first component is resolved from the root chunk

    If the expression resolves to a method, it's called and its return value
    is used, so that a count can be derived from more than one field.
    '''
    def __init__(self, expression):
        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, instance):
        fields_path = self.expression.split('.')
        # '.miao'.split(".") -> ['', 'miao']
        # 'miao'.split(".") -> ['miao']

        if fields_path[0] == '':
            field = instance.father
            fields_path = fields_path[1:]
        else:
            field = get_root_from_chunk(instance)

        if field is None:
            raise AttributeError(f"cannot resolve '{self.expression}' for a field without father")

        for component_name in fields_path:
            field = getattr(field, component_name)

        return field

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        field = self.resolve_field(instance)

        value = field() if inspect.ismethod(field) else field.value

        self.logger.debug("'%s' resolved with value %s", self.expression, value)

        return value


class PropertyDescriptor(object):
    """This the glue for dependency management: the attribute can contain a
    plain value or a Dependency, in the latter case it's resolved at access time."""

    def __init__(self, name: str, _type: type):
        self.name = name
        self.type = _type

    def __get__(self, instance, owner):
        if instance is None:
            return self

        data = instance.__dict__
        if self.name not in data:
            raise AttributeError(f"no '{self.name}' here!")

        value = data[self.name]

        if isinstance(value, Dependency):
            return value.resolve(instance)

        return value

    def __set__(self, instance, value):
        if not isinstance(value, (self.type, Dependency)):
            raise ValueError(f"A property must be of type {self.type} or a Dependency")

        instance.__dict__[self.name] = value

    def is_dependency(self, instance):
        return isinstance(instance.__dict__.get(self.name), Dependency)
