from schemalab.validators.schema import Schema


class TestSchemaFromMapping:
    def test_keywords_are_mapped(self):
        schema = Schema.from_mapping({
            "type": "object",
            "required": ["name"],
            "additionalProperties": False,
            "properties": {
                "name": {"type": "string", "minLength": 1, "maxLength": 10, "pattern": "^A"},
                "tags": {"type": "array", "minItems": 1, "maxItems": 3, "items": {"type": "string"}},
                "age": {"minimum": 0, "maximum": 150, "exclusiveMinimum": -1, "exclusiveMaximum": 151, "multipleOf": 1},
            },
        })

        assert schema.type == "object"
        assert schema.required == ["name"]
        assert schema.additional_properties is False
        assert schema.properties["name"].min_length == 1
        assert schema.properties["name"].pattern == "^A"
        assert schema.properties["tags"].items.type == "string"
        assert schema.properties["tags"].max_items == 3
        assert schema.properties["age"].multiple_of == 1
        assert schema.malformed == []

    def test_unknown_keywords_are_ignored(self):
        schema = Schema.from_mapping({"$schema": "x", "title": "T", "description": "d", "type": "string"})

        assert schema.type == "string"
        assert schema.malformed == []

    def test_whole_float_counts_are_accepted(self):
        assert Schema.from_mapping({"minItems": 2.0}).min_items == 2

    def test_bad_keyword_values_are_recorded(self):
        schema = Schema.from_mapping({
            "type": 5,
            "minLength": True,
            "minItems": -1,
            "maxLength": 1.5,
            "multipleOf": 0,
            "minimum": "0",
            "additionalProperties": {"type": "string"},
            "items": [{"type": "string"}],
            "required": "name",
            "enum": "a",
        })

        assert schema.malformed == [
            "type",
            "minLength",
            "minItems",
            "maxLength",
            "multipleOf",
            "minimum",
            "additionalProperties",
            "items",
            "required",
            "enum",
        ]
        assert schema.type is None
        assert schema.min_length is None

    def test_non_object_fragment_has_shape_error(self):
        schema = Schema.from_mapping({"properties": {"a": 5}})

        assert schema.properties["a"].shape_error is not None
        assert schema.shape_error is None
