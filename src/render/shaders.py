"""
GLSL sources for the gradient.

Keep in step with src/render/shading.py, which reproduces the same math in
numpy.
"""

VERTEX_SHADER = """
#version 330 core
in vec2 in_position;
in vec2 in_uv;
out vec2 vTextureCoord;
void main() {
    gl_Position = vec4(in_position, 0.0, 1.0);
    vTextureCoord = in_uv;
}
"""

FRAGMENT_SHADER = """
#version 330 core
in vec2 vTextureCoord;
out vec4 fragColor;

uniform float uTime;
uniform vec2 uResolution;

// Noise
uniform float uSeed;
uniform float uPeriod;
uniform float uRoughness;
uniform float uAmplitude;
uniform float uAnimationSpeed;

// Transform
uniform vec2 uTranslate;
uniform vec2 uScale;

// Effects
uniform float uPaperTexture;
uniform int uMirrorMode; // 0 = none, 1 = x, 2 = y, 3 = both

// Palette
uniform vec3 uColor0;
uniform vec3 uColor1;
uniform vec3 uColor2;
uniform vec3 uColor3;
uniform vec3 uColor4;

vec4 permute(vec4 x) { return mod(((x * 34.0) + 1.0) * x, 289.0); }
vec4 taylorInvSqrt(vec4 r) { return 1.79284291400159 - 0.85373472095314 * r; }

float snoise(vec3 v) {
    const vec2 C = vec2(1.0 / 6.0, 1.0 / 3.0);
    const vec4 D = vec4(0.0, 0.5, 1.0, 2.0);

    vec3 i = floor(v + dot(v, C.yyy));
    vec3 x0 = v - i + dot(i, C.xxx);

    vec3 g = step(x0.yzx, x0.xyz);
    vec3 l = 1.0 - g;
    vec3 i1 = min(g.xyz, l.zxy);
    vec3 i2 = max(g.xyz, l.zxy);

    vec3 x1 = x0 - i1 + C.xxx;
    vec3 x2 = x0 - i2 + C.yyy;
    vec3 x3 = x0 - D.yyy;

    i = mod(i, 289.0);
    vec4 p = permute(permute(permute(
             i.z + vec4(0.0, i1.z, i2.z, 1.0))
           + i.y + vec4(0.0, i1.y, i2.y, 1.0))
           + i.x + vec4(0.0, i1.x, i2.x, 1.0));

    float n_ = 1.0 / 7.0;
    vec3 ns = n_ * D.wyz - D.xzx;

    vec4 j = p - 49.0 * floor(p * ns.z * ns.z);

    vec4 x_ = floor(j * ns.z);
    vec4 y_ = floor(j - 7.0 * x_);

    vec4 x = x_ * ns.x + ns.yyyy;
    vec4 y = y_ * ns.x + ns.yyyy;
    vec4 h = 1.0 - abs(x) - abs(y);

    vec4 b0 = vec4(x.xy, y.xy);
    vec4 b1 = vec4(x.zw, y.zw);

    vec4 s0 = floor(b0) * 2.0 + 1.0;
    vec4 s1 = floor(b1) * 2.0 + 1.0;
    vec4 sh = -step(h, vec4(0.0));

    vec4 a0 = b0.xzyw + s0.xzyw * sh.xxyy;
    vec4 a1 = b1.xzyw + s1.xzyw * sh.zzww;

    vec3 p0 = vec3(a0.xy, h.x);
    vec3 p1 = vec3(a0.zw, h.y);
    vec3 p2 = vec3(a1.xy, h.z);
    vec3 p3 = vec3(a1.zw, h.w);

    vec4 norm = taylorInvSqrt(vec4(dot(p0, p0), dot(p1, p1), dot(p2, p2), dot(p3, p3)));
    p0 *= norm.x;
    p1 *= norm.y;
    p2 *= norm.z;
    p3 *= norm.w;

    vec4 m = max(0.6 - vec4(dot(x0, x0), dot(x1, x1), dot(x2, x2), dot(x3, x3)), 0.0);
    m = m * m;
    return 42.0 * dot(m * m, vec4(dot(p0, x0), dot(p1, x1), dot(p2, x2), dot(p3, x3)));
}

vec3 getColor(float value) {
    value = clamp(value * 2.0, 0.0, 1.0);
    if (value < 0.25) {
        return mix(uColor0, uColor1, smoothstep(0.0, 0.25, value));
    } else if (value < 0.5) {
        return mix(uColor1, uColor2, smoothstep(0.25, 0.5, value));
    } else if (value < 0.75) {
        return mix(uColor2, uColor3, smoothstep(0.5, 0.75, value));
    }
    return mix(uColor3, uColor4, smoothstep(0.75, 1.0, value));
}

float paperTexture(vec2 uv) {
    return snoise(vec3(uv * 1000.0, 0.0)) * uPaperTexture;
}

void main() {
    vec2 uv = vTextureCoord;

    float aspect = uResolution.x / uResolution.y;
    if (aspect > 1.0) {
        uv.x *= aspect;
    } else {
        uv.y /= aspect;
    }

    uv = (uv - 0.5) / uScale + 0.5;

    if (uMirrorMode == 1 || uMirrorMode == 3) {
        uv.x = abs(uv.x - 0.5) + 0.5;
    }
    if (uMirrorMode == 2 || uMirrorMode == 3) {
        uv.y = abs(uv.y - 0.5) + 0.5;
    }

    uv = uv + uTranslate - 0.5;

    vec3 noisePos = vec3(
        uv.x + uTime * uAnimationSpeed,
        uv.y + uTime * (uAnimationSpeed * 0.5),
        uSeed / 1000.0
    );

    float noiseValue = (snoise(noisePos * uPeriod) + 1.0) * 0.5;
    noiseValue += (snoise(noisePos * uPeriod * 2.0) + 1.0) * 0.5 * uRoughness * 0.5;
    noiseValue *= uAmplitude;

    vec3 color = getColor(noiseValue);
    color += paperTexture(uv);

    fragColor = vec4(color, 1.0);
}
"""
