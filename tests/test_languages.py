"""Full renderings of a struct using every construct, one test per language."""

from struct_to_string.core.renderer import render
from struct_to_string.languages import (
    CSHARP_PROFILE,
    GO_PROFILE,
    JAVA_PROFILE,
    PYTHON_PROFILE,
    RUST_PROFILE,
    TYPESCRIPT_PROFILE,
)


def test_to_rust(comprehensive_struct):
    expected = """struct ComprehensiveTestStruct {
    int_field: i32,
    uint_field: u32,
    float_field: f64,
    bool_field: bool,
    char_field: char,
    str_field: String,
    option_field: Option<i32>,
    array_field: [i32; 3],
    slice_field: Vec<i32>,
    tuple_field: (i32, String),
    tuple_struct_field: TupleStruct,
    enum_field: AnEnum,
    nested_struct_field: NestedStruct
}"""

    assert render(comprehensive_struct, RUST_PROFILE) == expected


def test_to_typescript(comprehensive_struct):
    expected = """interface ComprehensiveTestStruct {
  int_field: number;
  uint_field: number;
  float_field: number;
  bool_field: boolean;
  char_field: string;
  str_field: string;
  option_field: number | undefined;
  array_field: number[];
  slice_field: number[];
  tuple_field: [number, string];
  tuple_struct_field: TupleStruct;
  enum_field: AnEnum;
  nested_struct_field: NestedStruct;
}"""

    assert render(comprehensive_struct, TYPESCRIPT_PROFILE) == expected


def test_to_python(comprehensive_struct):
    expected = """@dataclass
class ComprehensiveTestStruct:
    int_field: int
    uint_field: int
    float_field: float
    bool_field: bool
    char_field: str
    str_field: str
    option_field: Optional[int]
    array_field: List[int]
    slice_field: List[int]
    tuple_field: Tuple[int, str]
    tuple_struct_field: TupleStruct
    enum_field: AnEnum
    nested_struct_field: NestedStruct"""

    assert render(comprehensive_struct, PYTHON_PROFILE) == expected


def test_to_go(comprehensive_struct):
    expected = (
        "type ComprehensiveTestStruct struct {\n"
        "\tIntField int32\n"
        "\tUintField uint32\n"
        "\tFloatField float64\n"
        "\tBoolField bool\n"
        "\tCharField rune\n"
        "\tStrField string\n"
        "\tOptionField *int32\n"
        "\tArrayField [3]int32\n"
        "\tSliceField []int32\n"
        "\tTupleField struct{} // CANNOT CONVERT THIS TO THE GO PROGRAMMING LANGUAGE. "
        "TUPLES ARE UNSUPPORTED BY GO: (int32, string)\n"
        "\tTupleStructField TupleStruct\n"
        "\tEnumField AnEnum\n"
        "\tNestedStructField NestedStruct\n"
        "}"
    )

    assert render(comprehensive_struct, GO_PROFILE) == expected


def test_to_java(comprehensive_struct):
    expected = """public class ComprehensiveTestStruct {
    public int int_field;
    public long uint_field;
    public double float_field;
    public boolean bool_field;
    public char char_field;
    public String str_field;
    public Integer option_field;
    public int[] array_field;
    public List<Integer> slice_field;
    public Tuple<Integer, String> tuple_field;
    public TupleStruct tuple_struct_field;
    public AnEnum enum_field;
    public NestedStruct nested_struct_field;
}"""

    assert render(comprehensive_struct, JAVA_PROFILE) == expected


def test_to_csharp(comprehensive_struct):
    expected = """public class ComprehensiveTestStruct {
    public int int_field;
    public uint uint_field;
    public double float_field;
    public bool bool_field;
    public char char_field;
    public string str_field;
    public int? option_field;
    public int[] array_field;
    public List<int> slice_field;
    public (int, string) tuple_field;
    public TupleStruct tuple_struct_field;
    public AnEnum enum_field;
    public NestedStruct nested_struct_field;
}"""

    assert render(comprehensive_struct, CSHARP_PROFILE) == expected
